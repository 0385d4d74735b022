"""Config API endpoint."""

from aiohttp import web

from ethph_academy.app_keys import config_key


def create_config_routes() -> list[web.RouteDef]:
    return [web.get("/api/config", get_config)]


async def get_config(request: web.Request) -> web.Response:
    config = request.app[config_key]
    return web.json_response(
        {
            "siteName": config.site.name,
            "repositoryUrl": config.site.repository_url,
            "compileDelaySeconds": config.playground.compile_delay,
            "failureRate": config.playground.failure_rate,
        },
    )
