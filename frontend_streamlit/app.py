"""
Library Catalog - Frontend Streamlit

Main entry point for the Streamlit application.
Renders the entities dropdown menu and dispatches client-side routes
(?route=/entity/<name>) to the matching CRUD screen.
"""

import streamlit as st

from utils.entity_views import render_entity_page
from utils.menu import load_entities_menu, render_entities_menu
from utils.state import HOME_ROUTE, get_route, init_session_state, navigate

st.set_page_config(
    page_title="Library Catalog",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

with st.sidebar:
    st.title("📚 Library Catalog")
    st.caption("Demo Frontend")

    st.divider()

    st.subheader("⚙️ Configuração")
    base_url = st.text_input(
        "URL do Backend",
        value=st.session_state.get("base_url", "http://localhost:8000"),
        help="URL base da API (sem /api)",
    )
    if base_url != st.session_state.base_url:
        st.session_state.base_url = base_url
        load_entities_menu.clear()

    st.divider()

    if st.button("🏠 Início", use_container_width=True):
        navigate(HOME_ROUTE)
        st.rerun()

    render_entities_menu()

route = get_route()

if route == HOME_ROUTE:
    st.title("📚 Bem-vindo ao Library Catalog")

    st.markdown("""
Este é o frontend de demonstração para a **Library Catalog API**.

### Entidades

- ✍️ **Autor**: nome, data de nascimento e biografia
- 📚 **Livro**: título, ISBN, descrição, data de publicação, páginas, autor e editora
- 💬 **Comentário**: texto associado a um livro
- 🏢 **Editora**: nome, país e website

### Começando

1. Confirme a URL do backend no menu lateral
2. Escolha uma entidade no menu **Entidades**
3. Liste, crie, edite ou remova registros
""")

elif not render_entity_page(route):
    st.warning(f"Rota desconhecida: `{route}`")
    if st.button("Voltar ao início"):
        navigate(HOME_ROUTE)
        st.rerun()

st.divider()

st.caption("Library Catalog Demo")
