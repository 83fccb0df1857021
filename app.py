import logging

from flask import Flask
from config import Config
from extensions import catalog


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    # init extensions
    catalog.init_app(app)

    # import and register blueprints / commands
    from routes import catalog_bp
    from cli import catalog_cli

    app.register_blueprint(catalog_bp)
    app.cli.add_command(catalog_cli)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
