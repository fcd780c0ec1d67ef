"""
Карточки товаров
"""
from html import escape


def _field(product: dict, key: str) -> str:
    value = product.get(key)
    if isinstance(value, float) and value.is_integer():
        value = int(value)  # число из JSON: 250.0 показываем как 250
    return "" if value is None else escape(str(value))


def product_card_html(product: dict) -> str:
    """Карточка одного товара: картинка, название, описание, цена как есть"""
    name = _field(product, "name")
    return (
        '<div class="product-card">'
        f'<img src="{_field(product, "imageUrl")}" alt="{name}"/>'
        f"<h3>{name}</h3>"
        f'<p>{_field(product, "description")}</p>'
        f'<p>{_field(product, "price")}</p>'
        "</div>"
    )


def render_product_cards(products, container) -> int:
    for product in products:
        container.markdown(product_card_html(product), unsafe_allow_html=True)
    return len(products)
