"""Pages API endpoint.

Returns tutorial metadata, neighbours along the learning path and the
rendered body as JSON.
"""

from hashlib import md5

from aiohttp import web

from ethph_academy.app_keys import navigation_key, renderer_key, router_key
from ethph_academy.core.navigation import NavigationItem
from ethph_academy.pages import TutorialPage


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    route = request.app[router_key].match(f"/{path}")
    if route is None or not isinstance(route.page, TutorialPage):
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    tutorial = route.page.tutorial
    result = request.app[renderer_key].render(tutorial)

    etag = _compute_etag(result.html)
    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    previous, following = request.app[navigation_key].neighbours(tutorial.path)
    response_data = {
        "meta": {
            "title": tutorial.title,
            "path": tutorial.path,
            "section": tutorial.section,
            "difficulty": tutorial.difficulty,
            "reading_time": tutorial.reading_time,
            "summary": tutorial.summary,
        },
        "previous": _link(previous),
        "next": _link(following),
        "content": result.html,
    }

    return web.json_response(
        response_data,
        headers={
            "ETag": etag,
            "Cache-Control": "public, max-age=300",
        },
    )


def _link(item: NavigationItem | None) -> dict[str, str] | None:
    if item is None:
        return None
    return {"title": item.title, "path": item.path}


def _compute_etag(content: str) -> str:
    # First 16 hex chars are enough to detect a changed body
    content_hash = md5(content.encode("utf-8"), usedforsecurity=False).hexdigest()[:16]
    return f'"{content_hash}"'
