"""
Unit tests for keeping the product search box and category picker in sync with the URL
"""
import httpx
import pytest

from ranch_site.apps.product.utils.query_sync import ProductQuerySync, SyncState, build_products_url


@pytest.fixture
def navigations():
    return []


def make_sync(url, navigations):
    return ProductQuerySync(url, navigations.append)


class TestBuildProductsUrl:
    def test_both_parameters(self):
        assert build_products_url("/products", "free range", "eggs") == "/products?search=free+range&category=eggs"

    def test_blank_search_is_dropped(self):
        assert build_products_url("/products", "   ", "beef") == "/products?category=beef"

    def test_no_parameters(self):
        assert build_products_url("/products") == "/products"


class TestProductQuerySync:
    def test_initial_state_from_url(self, navigations):
        sync = make_sync("/products?search=ribeye&category=beef", navigations)

        assert sync.query == "ribeye"
        assert sync.category == "beef"
        assert sync.state == SyncState.IDLE

    def test_every_keystroke_navigates(self, navigations):
        """No debounce: one navigation per input change"""
        sync = make_sync("/products", navigations)

        for value in ["r", "ri", "rib"]:
            sync.handle_input(value)

        assert navigations == ["/products?search=r", "/products?search=ri", "/products?search=rib"]
        assert sync.query == "rib"
        assert sync.state == SyncState.EDITING

    def test_input_preserves_category(self, navigations):
        sync = make_sync("/products?category=dairy", navigations)

        url = sync.handle_input("cheddar")

        assert url == "/products?category=dairy&search=cheddar"

    def test_blank_input_removes_search(self, navigations):
        sync = make_sync("/products?search=egg&category=eggs", navigations)

        sync.handle_input("  ")

        assert navigations[-1] == "/products?category=eggs"
        assert sync.query == "  "

    def test_url_change_wins(self, navigations):
        """Back/forward navigation replaces local state"""
        sync = make_sync("/products", navigations)
        sync.handle_input("honey")

        sync.on_url_change("/products?search=eggs&category=eggs")

        assert sync.query == "eggs"
        assert sync.category == "eggs"
        assert sync.state == SyncState.IDLE

    def test_url_without_search_clears_query(self, navigations):
        sync = make_sync("/products?search=eggs", navigations)

        sync.on_url_change("/products")

        assert sync.query == ""

    def test_clear_removes_parameter_and_keeps_category(self, navigations):
        sync = make_sync("/products?search=ribeye&category=beef", navigations)

        url = sync.clear()

        assert url == "/products?category=beef"
        assert "search" not in url
        assert sync.query == ""

    def test_clear_without_category(self, navigations):
        sync = make_sync("/products?search=ribeye", navigations)

        assert sync.clear() == "/products"

    def test_category_change_keeps_search(self, navigations):
        sync = make_sync("/products?search=raw", navigations)

        assert sync.select_category("dairy") == "/products?search=raw&category=dairy"
        assert sync.select_category(None) == "/products?search=raw"
        assert sync.category is None

    def test_other_parameters_survive_every_transition(self, navigations):
        """Only search and category are rewritten; anything else in the URL is kept"""
        sync = make_sync("/products?category=beef&page=2&sort=price", navigations)

        assert sync.handle_input("rib") == "/products?category=beef&page=2&sort=price&search=rib"
        assert sync.select_category("dairy") == "/products?category=dairy&page=2&sort=price&search=rib"
        assert sync.clear() == "/products?category=dairy&page=2&sort=price"
        assert sync.select_category(None) == "/products?page=2&sort=price"


class TestBuildProductsUrlWithParams:
    def test_existing_parameters_are_kept(self):
        params = httpx.QueryParams("page=2&search=old")

        assert build_products_url("/products", "new", "eggs", params) == "/products?page=2&search=new&category=eggs"

    def test_blank_search_removes_existing_value(self):
        params = httpx.QueryParams("search=old&page=3")

        assert build_products_url("/products", " ", None, params) == "/products?page=3"
