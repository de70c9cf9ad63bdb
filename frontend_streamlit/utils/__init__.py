"""
Utility modules for the Streamlit frontend.
"""

from .api_client import APIClient, APIError, get_api_client
from .entity_views import render_entity_page
from .formatters import format_alert, format_date, format_error
from .menu import render_entities_menu
from .state import init_session_state, get_route, navigate

__all__ = [
    "APIClient",
    "APIError",
    "get_api_client",
    "render_entity_page",
    "format_alert",
    "format_date",
    "format_error",
    "render_entities_menu",
    "init_session_state",
    "get_route",
    "navigate",
]
