"""Navigation API endpoint.

Returns the sidebar as rendered for a given current path. Each ``toggle``
query parameter flips the expansion flag of the section at that index,
starting from the authored defaults.
"""

from aiohttp import web

from ethph_academy.app_keys import navigation_key


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    current_path = request.query.get("path", "")
    navigation = request.app[navigation_key]

    for raw in request.query.getall("toggle", []):
        try:
            navigation = navigation.toggle_section(int(raw))
        except (ValueError, IndexError):
            return web.json_response(
                {"error": "Invalid section index", "toggle": raw},
                status=400,
            )

    return web.json_response(
        {"items": [section.to_dict() for section in navigation.view(current_path)]},
    )
