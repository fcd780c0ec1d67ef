"""
Заполнить БД товарами из CSV

    python -m catalog.scripts.seed_products [data/products.csv]
"""
import sys

from loguru import logger

from ..config import Settings
from ..db import ProductStore
from ..etl.load_to_db import read_products_csv, save_products

DEFAULT_CSV = "data/products.csv"


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    csv_path = argv[0] if argv else DEFAULT_CSV
    settings = Settings.from_env()

    store = ProductStore.connect(settings.database_url)
    if not store.available:
        return 1
    try:
        products = read_products_csv(csv_path)
        logger.info(f"Прочитано товаров из {csv_path}: {len(products)}")
        save_products(store, products)
    finally:
        store.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
