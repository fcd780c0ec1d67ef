"""
Streamlit интерфейс каталога товаров
"""
import streamlit as st

from catalog.config import Settings
from catalog.ui.cards import render_product_cards
from catalog.ui.loader import load_products_once

settings = Settings.from_env()

st.set_page_config(
    page_title="Каталог товаров",
    page_icon="🛒",
    layout="wide"
)

st.title("Товары")

products = load_products_once(st.session_state, settings.api_base_url)

product_list = st.container()
render_product_cards(products, product_list)
