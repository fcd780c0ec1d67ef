"""
Чтение каталога товаров
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .db import ProductStore


class ErrorKind(str, Enum):
    UNAVAILABLE = "unavailable"    # хранилище так и не подключилось
    QUERY_FAILED = "query_failed"  # запрос упал (например, нет таблицы)


@dataclass(frozen=True)
class StoreError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class QueryResult:
    """Либо строки таблицы, либо ошибка хранилища"""
    rows: List[Dict] = field(default_factory=list)
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "QueryResult":
        return cls(error=StoreError(kind, message))


def list_products(store: ProductStore) -> QueryResult:
    """Все строки products в порядке хранилища (без сортировки)"""
    if not store.available:
        return QueryResult.failure(ErrorKind.UNAVAILABLE, f"Хранилище недоступно: {store.connection_error}")

    try:
        with store.session() as s:
            rows = s.execute(text("SELECT * FROM products")).mappings().all()
            return QueryResult(rows=[dict(r) for r in rows])
    except SQLAlchemyError as e:
        message = str(getattr(e, "orig", None) or e)
        logger.error(f"Ошибка запроса товаров: {message}")
        return QueryResult.failure(ErrorKind.QUERY_FAILED, message)
