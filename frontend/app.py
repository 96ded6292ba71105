# frontend/app.py

from flask import Flask

from backend.config import configure_logging, load_config
from frontend.api import api_blueprint


def create_app(config: dict = None) -> Flask:
    app = Flask(__name__)
    app.config["MINESWEEPER"] = config or load_config()
    app.register_blueprint(api_blueprint, url_prefix="/api")
    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="Path to a game config yaml")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=None, help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging("DEBUG" if args.debug else config["logging"]["level"])

    host = args.host or config["api"]["host"]
    port = args.port or config["api"]["port"]

    app = create_app(config)
    print(f"Running on http://{host}:{port}/")
    app.run(debug=args.debug, host=host, port=port)


if __name__ == "__main__":
    main()
