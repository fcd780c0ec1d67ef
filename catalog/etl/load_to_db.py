"""
Загрузка товаров в БД из CSV
"""
from typing import Dict, List

import pandas as pd
from loguru import logger

from ..db import ProductStore
from ..models import Product

CSV_COLUMNS = ["id", "name", "description", "price", "imageUrl"]


def read_products_csv(path) -> List[Dict]:
    """Прочитать товары из CSV с колонками id,name,description,price,imageUrl"""
    df = pd.read_csv(path)
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"В CSV нет колонок: {', '.join(missing)}")
    df = df[CSV_COLUMNS].astype(object)
    df = df.where(pd.notna(df), None)
    return df.to_dict(orient="records")


def save_products(store: ProductStore, products: List[Dict]) -> int:
    """Сохранить товары в БД (upsert по id)"""
    store.create_schema()
    saved = 0

    with store.session() as session:
        try:
            for product_data in products:
                values = {
                    "name": product_data.get("name"),
                    "description": product_data.get("description"),
                    "price": product_data.get("price"),
                    "image_url": product_data.get("imageUrl"),
                }
                existing = session.get(Product, product_data["id"])
                if existing:
                    for key, value in values.items():
                        setattr(existing, key, value)
                else:
                    session.add(Product(id=product_data["id"], **values))
                saved += 1

            session.commit()
            logger.info(f"Сохранено товаров: {saved}")
            return saved
        except Exception as e:
            session.rollback()
            logger.error(f"Ошибка при сохранении товаров: {e}")
            raise
