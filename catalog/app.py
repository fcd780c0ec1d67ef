from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import Settings
from .db import ProductStore
from .routes.product_routes import bp as product_bp


def create_app(store=None, settings=None):
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    CORS(app)
    app.json.ensure_ascii = False
    app.json.sort_keys = False
    app.extensions["product_store"] = store or ProductStore.connect(settings.database_url)
    app.extensions["settings"] = settings
    app.register_blueprint(product_bp, url_prefix="/api")
    return app


def main():
    settings = Settings.from_env()
    app = create_app(settings=settings)
    logger.info(f"Сервер запущен на http://{settings.api_host}:{settings.api_port}")
    app.run(host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    main()
