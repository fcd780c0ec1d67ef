from flask import Blueprint, current_app, jsonify

from ..queries import list_products as query_products

bp = Blueprint("product", __name__)


@bp.get("/products")
def list_products():
    """Список всех товаров"""
    result = query_products(current_app.extensions["product_store"])
    if not result.ok:
        return result.error.message, 500, {"Content-Type": "text/plain; charset=utf-8"}
    return jsonify(result.rows)
