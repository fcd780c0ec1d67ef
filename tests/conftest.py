"""Общие фикстуры: временная SQLite БД, заполненное хранилище, клиент Flask."""
import pytest
from sqlalchemy import text

from catalog.app import create_app
from catalog.config import Settings
from catalog.db import ProductStore

KEYBOARD = {
    "id": 1,
    "name": "Teclado Gamer",
    "description": "Mecânico RGB",
    "price": 250,
    "imageUrl": "/img/kb.png",
}

MOUSE = {
    "id": 2,
    "name": "Mouse Gamer",
    "description": "Sensor óptico",
    "price": 129.9,
    "imageUrl": "/img/mouse.png",
}


def insert_rows(store, rows):
    with store.session() as s:
        s.execute(
            text(
                "INSERT INTO products (id, name, description, price, imageUrl) "
                "VALUES (:id, :name, :description, :price, :imageUrl)"
            ),
            rows,
        )
        s.commit()


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'database.sqlite'}"


@pytest.fixture
def raw_store(database_url):
    """Хранилище без таблицы products"""
    store = ProductStore.connect(database_url)
    yield store
    store.dispose()


@pytest.fixture
def empty_store(raw_store):
    raw_store.create_schema()
    return raw_store


@pytest.fixture
def seeded_store(empty_store):
    insert_rows(empty_store, [KEYBOARD, MOUSE])
    return empty_store


@pytest.fixture
def settings(database_url):
    return Settings(database_url=database_url)


@pytest.fixture
def make_client(settings):
    def _make(store):
        app = create_app(store=store, settings=settings)
        app.testing = True
        return app.test_client()
    return _make
