"""Tests for nextroutes.routing.detect — router type detection."""

from collections.abc import Callable
from pathlib import Path

import pytest

from nextroutes.routing import detect
from nextroutes.routing.detect import detect_router_type, has_page_file
from nextroutes.routing.types import RouterType


class TestDetectRouterType:
    def test_app_by_name(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        assert detect_router_type(tmp_path / "app") is RouterType.APP

    def test_pages_by_name(self, make_tree: Callable[..., Path]) -> None:
        # Name wins even when page files are present
        pages = make_tree(["x/page.js"], root="pages")
        assert detect_router_type(pages) is RouterType.PAGES

    def test_app_by_page_file(self, make_tree: Callable[..., Path]) -> None:
        routes = make_tree(["deep/nested/page.tsx"], root="routes")
        assert detect_router_type(routes) is RouterType.APP

    def test_defaults_to_pages(self, make_tree: Callable[..., Path]) -> None:
        routes = make_tree(["index.js", "about.js"], root="routes")
        assert detect_router_type(routes) is RouterType.PAGES

    def test_missing_directory_defaults_to_pages(self, tmp_path: Path) -> None:
        assert detect_router_type(tmp_path / "missing") is RouterType.PAGES

    def test_accepts_str(self, tmp_path: Path) -> None:
        (tmp_path / "app").mkdir()
        assert detect_router_type(str(tmp_path / "app")) is RouterType.APP


class TestHasPageFile:
    def test_found(self, make_tree: Callable[..., Path]) -> None:
        assert has_page_file(make_tree(["a/b/page.jsx"], root="src")) is True

    def test_not_found(self, make_tree: Callable[..., Path]) -> None:
        assert has_page_file(make_tree(["a/b/pages.jsx", "page.md"], root="src")) is False

    def test_errors_count_as_not_found(
        self, make_tree: Callable[..., Path], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        root = make_tree(["page.js"], root="src")

        def _list(directory: Path) -> list[Path]:
            raise PermissionError(13, "Permission denied", str(directory))

        monkeypatch.setattr(detect, "list_directory", _list)
        assert has_page_file(root) is False
