"""Tests for the static route table."""

import pytest
from aiohttp import web
from ethph_academy.core.catalog import TUTORIALS
from ethph_academy.core.types import URLPath
from ethph_academy.pages import NotFoundPage, ProjectsPage, TutorialPage, create_router
from ethph_academy.router import Route, Router


class TestResolve:
    """Tests for Router.resolve()."""

    def test__known_path__returns_bound_page(self) -> None:
        """Exact match resolves to the route's page."""
        router = create_router()

        resolution = router.resolve("/projects")

        assert resolution.found is True
        assert isinstance(resolution.route.page, ProjectsPage)

    def test__tutorial_path__returns_tutorial_page(self) -> None:
        router = create_router()

        resolution = router.resolve("/tutorials/erc20")

        assert resolution.found is True
        assert isinstance(resolution.route.page, TutorialPage)
        assert resolution.route.page.tutorial.slug == "erc20"

    def test__unknown_path__returns_not_found_page(self) -> None:
        """Misses fall back to the not-found page."""
        resolution = create_router().resolve("/nope")

        assert resolution.found is False
        assert isinstance(resolution.route.page, NotFoundPage)
        assert resolution.route.path == "/nope"

    def test__trailing_slash__is_not_normalised(self) -> None:
        """Paths match by exact string equality."""
        assert create_router().resolve("/projects/").found is False


class TestRouteTable:
    """Tests for the bundled route table."""

    def test__all_pages__are_routed(self) -> None:
        paths = {route.path for route in create_router()}

        assert {"/", "/projects", "/playground", "/resources"} <= paths
        assert {t.path for t in TUTORIALS} <= paths

    def test__every_route__resolves_to_itself(self) -> None:
        """Each path in the table resolves back to its own route."""
        router = create_router()

        for route in router:
            resolution = router.resolve(route.path)
            assert resolution.found is True, route.path
            assert resolution.route is route, route.path

    def test__route_count__matches_pages(self) -> None:
        """Home, 27 tutorials, projects, playground and resources."""
        assert len(create_router()) == 31

    def test__duplicate_path__raises_value_error(self) -> None:
        page = ProjectsPage()

        with pytest.raises(ValueError, match="Duplicate route path"):
            Router([Route(URLPath("/a"), page), Route(URLPath("/a"), page)], NotFoundPage())


class TestNavigate:
    """Tests for Router.navigate()."""

    def test__navigate__returns_see_other(self) -> None:
        redirect = Router.navigate("/playground")

        assert isinstance(redirect, web.HTTPSeeOther)
        assert redirect.location == "/playground"
