"""
Product search/category state kept in sync with the URL query string

The product listing is rendered server-side from ``?search=`` and
``?category=``. ``ProductQuerySync`` models the browser-side search box
and category picker: every keystroke updates local state and navigates
to a rebuilt URL; navigation coming from outside (back/forward) is
adopted as the new truth.
"""
from enum import Enum
from typing import Callable, Optional

import httpx

SEARCH_PARAM = "search"
CATEGORY_PARAM = "category"


class SyncState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


def _with_param(params: httpx.QueryParams, key: str, value: Optional[str]) -> httpx.QueryParams:
    return params.set(key, value) if value else params.remove(key)


def build_products_url(
    path: str,
    search: Optional[str] = None,
    category: Optional[str] = None,
    params: Optional[httpx.QueryParams] = None,
) -> str:
    """
    Build a listing URL carrying both filters.

    Any other parameters in ``params`` are kept as they are; only
    ``search`` and ``category`` are set or removed. Blank values drop
    their parameter entirely instead of sending ``search=``.
    """
    params = httpx.QueryParams(params or {})
    params = _with_param(params, SEARCH_PARAM, search if search and search.strip() else None)
    params = _with_param(params, CATEGORY_PARAM, category)
    query_string = str(params)
    return f"{path}?{query_string}" if query_string else path


class ProductQuerySync:
    def __init__(self, url: str, navigate: Callable[[str], None]):
        self._navigate = navigate
        self.state = SyncState.IDLE
        self._read_url(url)
        self.query = self._url_search

    def _read_url(self, url: str) -> None:
        parsed = httpx.URL(url)
        self.url = url
        self.path = parsed.path or "/"
        self.params = parsed.params
        self._url_search = self.params.get(SEARCH_PARAM, "")
        self.category = self.params.get(CATEGORY_PARAM) or None

    def _push(self, url: str) -> str:
        self.params = httpx.URL(url).params
        self._navigate(url)
        return url

    def handle_input(self, value: str) -> str:
        """Text input changed: update local state now and navigate (no debounce)."""
        self.query = value
        self.state = SyncState.EDITING
        return self._push(build_products_url(self.path, value, self.category, self.params))

    def on_url_change(self, url: str) -> None:
        """URL changed (navigation settled, or back/forward): the URL wins."""
        self._read_url(url)
        self.query = self._url_search
        self.state = SyncState.IDLE

    def clear(self) -> str:
        self.query = ""
        self.state = SyncState.EDITING
        return self._push(build_products_url(self.path, None, self.category, self.params))

    def select_category(self, category: Optional[str]) -> str:
        self.category = category or None
        self.state = SyncState.EDITING
        return self._push(build_products_url(self.path, self.query, self.category, self.params))
