"""
CRUD screens for the catalog entities.

Every entity gets the same three tabs (list, create, edit/remove). The
book screen also filters the list by author or publisher.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

import streamlit as st

from .api_client import APIError, get_api_client
from .formatters import ENTITY_LABELS, format_alert, format_date, format_error


@dataclass(frozen=True)
class Field:
    name: str
    label: str
    kind: str = "text"  # text | textarea | date | int
    required: bool = False


@dataclass(frozen=True)
class EntityView:
    entity: str
    endpoint: str
    fields: tuple[Field, ...]
    columns: tuple[str, ...]
    filters: dict[str, str] = field(default_factory=dict)

    @property
    def label(self) -> str:
        return ENTITY_LABELS[self.entity]


ENTITY_VIEWS = {
    "/entity/author": EntityView(
        entity="author",
        endpoint="authors",
        fields=(
            Field("name", "Nome", required=True),
            Field("birth_date", "Data de nascimento", "date"),
            Field("biography", "Biografia", "textarea"),
        ),
        columns=("id", "name", "birth_date"),
    ),
    "/entity/book": EntityView(
        entity="book",
        endpoint="books",
        fields=(
            Field("title", "Título", required=True),
            Field("isbn", "ISBN"),
            Field("description", "Descrição", "textarea"),
            Field("publication_date", "Data de publicação", "date"),
            Field("pages", "Páginas", "int"),
            Field("author_id", "ID do autor", "int"),
            Field("publisher_id", "ID da editora", "int"),
        ),
        columns=("id", "title", "isbn", "publication_date", "author_id", "publisher_id"),
        filters={"author": "Por autor", "publisher": "Por editora"},
    ),
    "/entity/comment": EntityView(
        entity="comment",
        endpoint="comments",
        fields=(
            Field("text", "Texto", "textarea", required=True),
            Field("book_id", "ID do livro", "int", required=True),
        ),
        columns=("id", "book_id", "text"),
    ),
    "/entity/publisher": EntityView(
        entity="publisher",
        endpoint="publishers",
        fields=(
            Field("name", "Nome", required=True),
            Field("country", "País"),
            Field("website", "Website"),
        ),
        columns=("id", "name", "country"),
    ),
}


def _input(view: EntityView, f: Field, current: Any, key: str) -> Any:
    """Render one form widget and return its value."""
    label = f"{f.label} *" if f.required else f.label
    widget_key = f"{view.entity}_{key}_{f.name}"

    if f.kind == "textarea":
        return st.text_area(label, value=current or "", key=widget_key)
    if f.kind == "date":
        value = date.fromisoformat(current) if current else None
        return st.date_input(label, value=value, format="DD/MM/YYYY", key=widget_key)
    if f.kind == "int":
        return st.number_input(label, min_value=1, value=current, step=1, key=widget_key)
    return st.text_input(label, value=current or "", key=widget_key)


def _payload(view: EntityView, values: dict[str, Any]) -> dict[str, Any]:
    """Convert widget values into a JSON body; blanks become null."""
    payload: dict[str, Any] = {}
    for f in view.fields:
        value = values.get(f.name)
        if isinstance(value, str):
            value = value.strip() or None
        elif isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, float):
            value = int(value)
        payload[f.name] = value
    return payload


def _missing_required(view: EntityView, payload: dict[str, Any]) -> list[str]:
    return [f.label for f in view.fields if f.required and payload.get(f.name) is None]


def _render_list(view: EntityView) -> None:
    api = get_api_client()

    endpoint = view.endpoint
    if view.filters:
        options = {"all": "Todos", **view.filters}
        mode = st.radio(
            "Filtro",
            options=list(options),
            format_func=options.get,
            horizontal=True,
            key=f"{view.entity}_filter",
        )
        if mode != "all":
            ref_id = st.number_input(
                f"ID ({options[mode].lower()})", min_value=1, step=1, key=f"{view.entity}_filter_id"
            )
            endpoint = f"{view.endpoint}/{mode}/{int(ref_id)}"

    col1, col2, col3 = st.columns(3)
    with col1:
        size = st.selectbox("Itens por página", [10, 20, 50, 100], index=1, key=f"{view.entity}_size")
    with col2:
        sort_field = st.selectbox("Ordenar por", view.columns, key=f"{view.entity}_sort")
    with col3:
        direction = st.selectbox("Direção", ["asc", "desc"], key=f"{view.entity}_direction")

    page = st.number_input("Página", min_value=1, value=1, step=1, key=f"{view.entity}_page")

    try:
        result = api.get_page(endpoint, page=int(page) - 1, size=size, sort=[f"{sort_field},{direction}"])
    except APIError as e:
        st.error(f"❌ {format_error(e)}")
        return

    total_pages = max((result.total + size - 1) // size, 1)
    st.caption(f"{result.total} registro(s) · página {int(page)} de {total_pages}")

    if not result.items:
        st.info("Nenhum registro encontrado")
        return

    rows = []
    for item in result.items:
        row = {}
        for column in view.columns:
            value = item.get(column)
            row[column] = format_date(value) if column.endswith("_date") else value
        rows.append(row)
    st.dataframe(rows, use_container_width=True, hide_index=True)


def _render_create(view: EntityView) -> None:
    with st.form(f"{view.entity}_create_form", clear_on_submit=True):
        values = {f.name: _input(view, f, None, "create") for f in view.fields}
        submitted = st.form_submit_button("Criar", use_container_width=True)

    if not submitted:
        return

    payload = _payload(view, values)
    missing = _missing_required(view, payload)
    if missing:
        st.error(f"Preencha: {', '.join(missing)}")
        return

    try:
        _, alert = get_api_client().post(view.endpoint, payload)
        st.success(f"✅ {format_alert(alert)}")
    except APIError as e:
        st.error(f"❌ {format_error(e)}")


def _render_edit(view: EntityView) -> None:
    api = get_api_client()
    state_key = f"{view.entity}_editing"

    col1, col2 = st.columns([3, 1])
    with col1:
        entity_id = st.number_input("ID", min_value=1, step=1, key=f"{view.entity}_edit_id")
    with col2:
        st.write("")
        if st.button("Carregar", use_container_width=True, key=f"{view.entity}_load"):
            try:
                st.session_state[state_key] = api.get(f"{view.endpoint}/{int(entity_id)}")
            except APIError as e:
                st.session_state.pop(state_key, None)
                st.error(f"❌ {format_error(e)}")

    record: Optional[dict] = st.session_state.get(state_key)
    if not record:
        return

    with st.form(f"{view.entity}_edit_form"):
        st.caption(f"{view.label} #{record['id']}")
        values = {f.name: _input(view, f, record.get(f.name), f"edit_{record['id']}") for f in view.fields}
        col1, col2 = st.columns(2)
        with col1:
            save = st.form_submit_button("Salvar", use_container_width=True)
        with col2:
            remove = st.form_submit_button("Remover", type="secondary", use_container_width=True)

    try:
        if save:
            payload = _payload(view, values)
            missing = _missing_required(view, payload)
            if missing:
                st.error(f"Preencha: {', '.join(missing)}")
                return
            payload["id"] = record["id"]
            updated, alert = api.put(view.endpoint, payload)
            st.session_state[state_key] = updated
            st.success(f"✅ {format_alert(alert)}")
        elif remove:
            alert = api.delete(f"{view.endpoint}/{record['id']}")
            st.session_state.pop(state_key, None)
            st.success(f"✅ {format_alert(alert)}")
    except APIError as e:
        st.error(f"❌ {format_error(e)}")


def render_entity_page(route: str) -> bool:
    """
    Render the CRUD screen for a client-side route.

    Returns False when the route does not belong to any entity.
    """
    view = ENTITY_VIEWS.get(route)
    if view is None:
        return False

    st.title(f"{view.label}")

    tab_list, tab_create, tab_edit = st.tabs(["📋 Lista", "➕ Novo", "✏️ Editar / Remover"])
    with tab_list:
        _render_list(view)
    with tab_create:
        _render_create(view)
    with tab_edit:
        _render_edit(view)
    return True
