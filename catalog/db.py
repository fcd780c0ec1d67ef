"""
Доступ к хранилищу товаров
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base


class ProductStore:
    """Соединение с таблицей products, открывается один раз при старте процесса"""

    def __init__(self, engine: Optional[Engine], connection_error: Optional[str] = None):
        self.engine = engine
        self.connection_error = connection_error
        self._sessionmaker = None
        if engine is not None:
            self._sessionmaker = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)

    @classmethod
    def connect(cls, database_url: str) -> "ProductStore":
        """
        Открыть хранилище. Ошибка подключения не фатальна: она пишется в лог,
        а процесс продолжает работать с хранилищем в деградированном режиме.
        """
        try:
            connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
            engine = create_engine(database_url, echo=False, future=True, connect_args=connect_args)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            # нет драйвера, нет каталога для файла, БД не отвечает
            logger.error(f"Не удалось подключиться к БД: {e}")
            return cls(None, connection_error=str(e))
        logger.info(f"Подключено к БД: {engine.url.render_as_string(hide_password=True)}")
        return cls(engine)

    @property
    def available(self) -> bool:
        return self.engine is not None

    @contextmanager
    def session(self) -> Iterator[Session]:
        if self._sessionmaker is None:
            raise RuntimeError(f"Хранилище недоступно: {self.connection_error}")
        s = self._sessionmaker()
        try:
            yield s
        finally:
            s.close()

    def create_schema(self):
        """Создать таблицу products, если её нет"""
        if self.engine is None:
            raise RuntimeError(f"Хранилище недоступно: {self.connection_error}")
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        if self.engine is not None:
            self.engine.dispose()
