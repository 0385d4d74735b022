"""Static route table.

Maps literal URL paths to pages. Lookup is exact string matching; a miss
resolves to the not-found page so every path renders something.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from aiohttp import web

from ethph_academy.core.types import URLPath

if TYPE_CHECKING:
    from ethph_academy.pages import Page


@dataclass(frozen=True)
class Route:
    """Literal path bound to a page."""

    path: URLPath
    page: Page


@dataclass(frozen=True)
class Resolution:
    """Result of resolving a path against the route table."""

    route: Route
    found: bool


class Router:
    """Route table with exact-match resolution."""

    __slots__ = ("_not_found", "_path_index", "_routes")

    def __init__(self, routes: list[Route], not_found: Page) -> None:
        """Initialize the router.

        Args:
            routes: Route table in declaration order
            not_found: Page rendered for unmatched paths

        Raises:
            ValueError: If two routes share a path
        """
        self._routes = list(routes)
        self._path_index: dict[str, int] = {}
        for idx, route in enumerate(self._routes):
            if route.path in self._path_index:
                raise ValueError(f"Duplicate route path: {route.path}")
            self._path_index[route.path] = idx
        self._not_found = not_found

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def match(self, path: str) -> Route | None:
        """Get the route for ``path``, or None."""
        idx = self._path_index.get(path)
        if idx is None:
            return None
        return self._routes[idx]

    def resolve(self, path: str) -> Resolution:
        """Resolve ``path`` to a page.

        Unmatched paths resolve to the not-found page with ``found=False``.
        """
        route = self.match(path)
        if route is None:
            return Resolution(route=Route(path=URLPath(path), page=self._not_found), found=False)
        return Resolution(route=route, found=True)

    @staticmethod
    def navigate(path: str) -> web.HTTPSeeOther:
        """Build a redirect asking the browser to load ``path``.

        Handlers raise the returned exception; rendering happens when the
        browser requests the new location.
        """
        return web.HTTPSeeOther(location=path)
