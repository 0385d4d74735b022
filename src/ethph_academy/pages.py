"""Content pages rendered into the shell's content slot.

Each page returns a PageContent: an HTML fragment plus the few bits of
metadata the shell needs (title, description, cookies, auto refresh).
"""

from dataclasses import dataclass, field
from typing import Protocol

from aiohttp import web

from ethph_academy.app_keys import navigation_key, renderer_key, sessions_key, templates_key
from ethph_academy.core.catalog import (
    FEATURED_TUTORIALS,
    PROJECTS,
    TUTORIALS,
    Tutorial,
    resources_by_category,
)
from ethph_academy.core.playground import Playground
from ethph_academy.core.types import URLPath
from ethph_academy.router import Route, Router

SESSION_COOKIE = "playground_session"
COMPILE_REFRESH_SECONDS = 1


@dataclass
class PageContent:
    """Rendered content slot."""

    title: str
    html: str
    description: str | None = None
    cookies: dict[str, str] = field(default_factory=dict)
    refresh: int | None = None


class Page(Protocol):
    """Anything the router can bind to a path."""

    @property
    def title(self) -> str: ...

    async def render(self, request: web.Request) -> PageContent: ...


def _render_template(request: web.Request, name: str, **context: object) -> str:
    return request.app[templates_key].get_template(name).render(**context)


class HomePage:
    title = "Home"

    async def render(self, request: web.Request) -> PageContent:
        html = _render_template(request, "home.html", featured=FEATURED_TUTORIALS)
        return PageContent(
            title=self.title,
            html=html,
            description="Learn Solidity and smart contract development.",
        )


class TutorialPage:
    """Tutorial prose with previous/next links along the learning path."""

    def __init__(self, tutorial: Tutorial) -> None:
        self.tutorial = tutorial

    @property
    def title(self) -> str:
        return self.tutorial.title

    async def render(self, request: web.Request) -> PageContent:
        result = request.app[renderer_key].render(self.tutorial)
        previous, following = request.app[navigation_key].neighbours(self.tutorial.path)
        html = _render_template(
            request,
            "tutorial.html",
            tutorial=self.tutorial,
            body=result.html,
            previous=previous,
            next=following,
        )
        return PageContent(title=self.title, html=html, description=self.tutorial.summary)


class ProjectsPage:
    title = "Community Projects"

    async def render(self, request: web.Request) -> PageContent:
        html = _render_template(request, "projects.html", projects=PROJECTS)
        return PageContent(title=self.title, html=html)


class ResourcesPage:
    title = "Solidity Learning Resources"

    async def render(self, request: web.Request) -> PageContent:
        html = _render_template(request, "resources.html", groups=resources_by_category())
        return PageContent(title=self.title, html=html)


class PlaygroundPage:
    """Editor, template picker and compile output for the visitor's session."""

    title = "Solidity Playground"

    async def render(self, request: web.Request) -> PageContent:
        playground, cookies = current_playground(request)
        state = playground.state
        html = _render_template(
            request,
            "playground.html",
            templates=list(playground.templates),
            template=playground.template,
            state=state,
        )
        return PageContent(
            title=self.title,
            html=html,
            cookies=cookies,
            refresh=COMPILE_REFRESH_SECONDS if state.is_compiling else None,
        )


class NotFoundPage:
    title = "Page Not Found"

    async def render(self, request: web.Request) -> PageContent:
        html = _render_template(request, "not_found.html", path=request.path)
        return PageContent(title=self.title, html=html)


def current_playground(request: web.Request) -> tuple[Playground, dict[str, str]]:
    """Get the visitor's playground, mounting a new one if needed.

    Returns:
        (playground, cookies to set on the response)
    """
    sessions = request.app[sessions_key]
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id:
        playground = sessions.get(session_id)
        if playground is not None:
            return playground, {}

    session_id, playground = sessions.create()
    return playground, {SESSION_COOKIE: session_id}


def create_router() -> Router:
    """Build the site's route table."""
    routes = [Route(URLPath("/"), HomePage())]
    routes.extend(Route(tutorial.path, TutorialPage(tutorial)) for tutorial in TUTORIALS)
    routes.extend(
        [
            Route(URLPath("/projects"), ProjectsPage()),
            Route(URLPath("/playground"), PlaygroundPage()),
            Route(URLPath("/resources"), ResourcesPage()),
        ]
    )
    return Router(routes, not_found=NotFoundPage())
