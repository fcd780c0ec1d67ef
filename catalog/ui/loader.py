"""
Загрузка каталога с API для интерфейса
"""
from typing import List, MutableMapping

import requests
from loguru import logger

PRODUCTS_PATH = "/api/products"
STATE_KEY = "products"
LOADED_KEY = "products_loaded"


def fetch_products(api_base_url: str) -> List[dict]:
    """Один GET /api/products, возвращает JSON как есть"""
    response = requests.get(api_base_url.rstrip("/") + PRODUCTS_PATH)
    response.raise_for_status()
    return response.json()


def load_products_once(state: MutableMapping, api_base_url: str) -> List[dict]:
    """
    Загрузить товары при первом запуске страницы и положить в state.

    Повторные вызовы с тем же state запросов не делают. Ошибки пользователю
    не показываются: список остаётся пустым, сбой попадает только в лог.
    """
    if state.get(LOADED_KEY):
        return state.get(STATE_KEY, [])

    state[LOADED_KEY] = True
    state.setdefault(STATE_KEY, [])
    try:
        data = fetch_products(api_base_url)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Не удалось загрузить товары: {e}")
        return state[STATE_KEY]

    if isinstance(data, list):
        state[STATE_KEY] = data
    else:
        logger.warning(f"Неожиданный ответ API: {type(data).__name__}")
    return state[STATE_KEY]
