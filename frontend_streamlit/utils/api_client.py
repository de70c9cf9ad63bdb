"""
API Client wrapper for the Library Catalog API.

Provides a unified interface for making HTTP requests to the backend
with error handling, pagination headers and alert headers.
"""

from dataclasses import dataclass
from typing import Any, Optional

import requests
import streamlit as st

ALERT_APP_NAME = "libraryApp"


class APIError(Exception):
    """Custom exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        error_key: Optional[str] = None,
        entity_name: Optional[str] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_key = error_key
        self.entity_name = entity_name
        super().__init__(self.message)


@dataclass
class Alert:
    """Alert sent by the backend in X-<app>-alert / X-<app>-params headers."""
    key: str
    param: str


@dataclass
class PageResult:
    """A page of items plus the total from X-Total-Count."""
    items: list[dict]
    total: int


class APIClient:
    """
    HTTP client for the Library Catalog API.

    Features:
        - Timeout handling (failures surface immediately, no resend)
        - Structured error responses (error_key + entity_name)
        - Pagination and alert header parsing
    """

    DEFAULT_TIMEOUT = 10

    def __init__(self, base_url: Optional[str] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the API (without /api suffix)
        """
        self.base_url = (base_url or "http://localhost:8000").rstrip("/")
        self.api_prefix = "/api"

    def _get_url(self, endpoint: str) -> str:
        """Build full URL for an endpoint."""
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}{self.api_prefix}/{endpoint}"

    def _raise_for_error(self, response: requests.Response) -> None:
        """
        Raise APIError for non-2xx responses.

        Understands both the structured error body (message, error_key,
        entity_name) and FastAPI's default {"detail": ...}.
        """
        if response.status_code == 429:
            detail = response.json().get("detail", "Muitas requisições")
            raise APIError(f"Rate limit: {detail}", 429)

        if response.status_code < 400:
            return

        try:
            error_data = response.json()
        except ValueError:
            raise APIError(response.text or f"Erro HTTP {response.status_code}", response.status_code)

        if "error_key" in error_data:
            raise APIError(
                error_data.get("message", error_data["error_key"]),
                response.status_code,
                error_key=error_data["error_key"],
                entity_name=error_data.get("entity_name"),
            )

        detail = error_data.get("detail", str(error_data))
        if isinstance(detail, list):
            detail = "; ".join(e.get("msg", str(e)) for e in detail)
        raise APIError(detail, response.status_code)

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without /api prefix)
            **kwargs: Additional arguments for requests

        Returns:
            The successful response

        Raises:
            APIError: For API errors
        """
        url = self._get_url(endpoint)
        kwargs.setdefault("timeout", self.DEFAULT_TIMEOUT)

        try:
            response = requests.request(method=method, url=url, **kwargs)
        except requests.exceptions.Timeout:
            raise APIError("Tempo de requisição esgotado", 0)
        except requests.exceptions.ConnectionError:
            raise APIError(
                "Não foi possível conectar ao servidor. Verifique se o backend está rodando.",
                0,
            )

        self._raise_for_error(response)
        return response

    @staticmethod
    def _alert(response: requests.Response) -> Optional[Alert]:
        key = response.headers.get(f"X-{ALERT_APP_NAME}-alert")
        if key is None:
            return None
        return Alert(key=key, param=response.headers.get(f"X-{ALERT_APP_NAME}-params", ""))

    def get(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """Make a GET request and return the JSON body."""
        return self._request("GET", endpoint, params=params).json()

    def get_page(self, endpoint: str, page: int = 0, size: int = 20, sort: Optional[list[str]] = None) -> PageResult:
        """GET a paginated list; the total comes from the X-Total-Count header."""
        params: dict[str, Any] = {"page": page, "size": size}
        if sort:
            params["sort"] = sort
        response = self._request("GET", endpoint, params=params)
        return PageResult(
            items=response.json(),
            total=int(response.headers.get("X-Total-Count", 0)),
        )

    def post(self, endpoint: str, json: dict) -> tuple[dict, Optional[Alert]]:
        """Make a POST request. Returns (body, alert)."""
        response = self._request("POST", endpoint, json=json)
        return response.json(), self._alert(response)

    def put(self, endpoint: str, json: dict) -> tuple[dict, Optional[Alert]]:
        """Make a PUT request. Returns (body, alert)."""
        response = self._request("PUT", endpoint, json=json)
        return response.json(), self._alert(response)

    def delete(self, endpoint: str) -> Optional[Alert]:
        """Make a DELETE request. Returns the alert, if any."""
        return self._alert(self._request("DELETE", endpoint))


def get_api_client() -> APIClient:
    """
    Get the API client instance.

    Uses the base_url from session state if configured.
    """
    base_url = st.session_state.get("base_url", "http://localhost:8000")
    return APIClient(base_url)
