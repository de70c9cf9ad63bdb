"""
Session state management utilities.

Keeps the backend URL and the current client-side route. The route is
mirrored in the page URL (?route=/entity/book) so it survives reloads
and can be bookmarked.
"""

import streamlit as st

HOME_ROUTE = "/"


def init_session_state() -> None:
    """
    Initialize session state with default values.

    Should be called at the start of the application.
    """
    defaults = {
        "base_url": "http://localhost:8000",
        "route": st.query_params.get("route", HOME_ROUTE),
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_route() -> str:
    """Get the current client-side route."""
    return st.session_state.get("route", HOME_ROUTE)


def navigate(route: str) -> None:
    """Navigate to a client-side route."""
    st.session_state.route = route
    if route == HOME_ROUTE:
        st.query_params.clear()
    else:
        st.query_params["route"] = route
