from catalog.app import create_app
from catalog.db import ProductStore

from .conftest import KEYBOARD, MOUSE, insert_rows


def test_products_returns_all_rows(seeded_store, make_client):
    response = make_client(seeded_store).get("/api/products")

    assert response.status_code == 200
    data = response.get_json()
    assert len(data) == 2
    assert sorted(data, key=lambda p: p["id"]) == [KEYBOARD, MOUSE]


def test_products_single_row_example(empty_store, make_client):
    insert_rows(empty_store, [KEYBOARD])

    response = make_client(empty_store).get("/api/products")

    assert response.status_code == 200
    assert response.get_json() == [KEYBOARD]
    body = response.get_data(as_text=True)
    assert '"price":250' in body
    assert '"price":250.0' not in body
    assert "Mecânico RGB" in body


def test_products_empty_store(empty_store, make_client):
    response = make_client(empty_store).get("/api/products")

    assert response.status_code == 200
    assert response.get_json() == []


def test_products_missing_table_is_500(raw_store, make_client):
    response = make_client(raw_store).get("/api/products")

    assert response.status_code == 500
    assert response.mimetype == "text/plain"
    assert "no such table" in response.get_data(as_text=True)


def test_products_failed_connection_is_500(make_client):
    store = ProductStore(None, connection_error="unable to open database file")

    response = make_client(store).get("/api/products")

    assert response.status_code == 500
    assert "unable to open database file" in response.get_data(as_text=True)


def test_cross_origin_allowed(seeded_store, make_client):
    response = make_client(seeded_store).get(
        "/api/products", headers={"Origin": "http://localhost:8501"}
    )

    assert response.headers["Access-Control-Allow-Origin"] in ("*", "http://localhost:8501")


def test_only_get_is_routed(seeded_store, make_client):
    client = make_client(seeded_store)

    assert client.post("/api/products").status_code == 405
    assert client.get("/api/products/1").status_code == 404
    assert client.get("/products").status_code == 404


def test_create_app_opens_store_from_settings(settings, seeded_store):
    app = create_app(settings=settings)
    response = app.test_client().get("/api/products")

    assert response.status_code == 200
    assert len(response.get_json()) == 2
    app.extensions["product_store"].dispose()
