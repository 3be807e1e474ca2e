# frontend/app.py

import logging

from flask import Flask, render_template

from backend.config import DEFAULT_CONFIG_PATH, DEFAULTS, load_config
from backend.levels import LEVELS
from frontend.api import api_blueprint

logger = logging.getLogger(__name__)

app = Flask(__name__, static_folder="static", template_folder="templates")
app.config.update(DEFAULT_LEVEL=DEFAULTS["default_level"], SEED=DEFAULTS["seed"])
app.register_blueprint(api_blueprint, url_prefix="/api")


@app.route("/")
def index():
    return render_template(
        "index.html",
        levels=list(enumerate(LEVELS)),
        default_level=app.config["DEFAULT_LEVEL"],
    )


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Path to the settings YAML file")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=None, help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    logging.basicConfig(
        level=str(config["log_level"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    host = args.host or config["host"]
    port = args.port or config["port"]
    debug = args.debug or bool(config["debug"])
    app.config.update(DEFAULT_LEVEL=config["default_level"], SEED=config["seed"])

    logger.info("Running on http://%s:%s/", host, port)
    app.run(debug=debug, host=host, port=port)


if __name__ == "__main__":
    main()
