from setuptools import setup, find_packages

setup(
    name="minesweeper_web",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "frontend": ["templates/*.html", "static/*"],
    },
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "tests": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minesweeper-ui=frontend.app:main"
        ]
    },
)
