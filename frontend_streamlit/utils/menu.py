"""
Entities dropdown menu.

The menu table lives in the backend (GET /api/menu/entities) and is
fetched once per backend URL. Label keys are translated here.
"""

from typing import Optional

import streamlit as st

from .api_client import APIClient, APIError
from .state import get_route, navigate

LABELS = {
    "global.menu.entities.main": "Entidades",
    "global.menu.entities.author": "Autor",
    "global.menu.entities.book": "Livro",
    "global.menu.entities.comment": "Comentário",
    "global.menu.entities.publisher": "Editora",
}

ICONS = {
    "th-list": "🗂️",
    "asterisk": "✳️",
}


def translate(label_key: str) -> str:
    """Translate a label key; unknown keys are shown as-is."""
    return LABELS.get(label_key, label_key)


@st.cache_data(show_spinner=False)
def load_entities_menu(base_url: str) -> dict:
    """Fetch the entities menu declaration from the backend."""
    return APIClient(base_url).get("menu/entities")


def render_entities_menu() -> Optional[str]:
    """
    Render the entities dropdown in the sidebar.

    Selecting an item navigates to its route. Returns the selected
    route, or None when the menu could not be loaded.
    """
    try:
        menu = load_entities_menu(st.session_state.base_url)
    except APIError as e:
        st.error(f"Menu indisponível: {e.message}")
        return None

    routes = [item["route"] for item in menu["items"]]
    labels = {
        item["route"]: f"{ICONS.get(item['icon'], '')} {translate(item['label_key'])}".strip()
        for item in menu["items"]
    }

    current = get_route()
    header = f"{ICONS.get(menu['icon'], '')} {translate(menu['label_key'])}".strip()
    selected = st.selectbox(
        header,
        options=routes,
        index=routes.index(current) if current in routes else None,
        format_func=labels.get,
        placeholder="Selecione uma entidade",
    )

    if selected is not None and selected != current:
        navigate(selected)
        st.rerun()

    return selected
