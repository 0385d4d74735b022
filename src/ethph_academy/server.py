"""aiohttp server for ETHPH Academy.

Application factory and route registration.
"""

import logging

from aiohttp import web

from ethph_academy.api.config import create_config_routes
from ethph_academy.api.navigation import create_navigation_routes
from ethph_academy.api.pages import create_pages_routes
from ethph_academy.api.playground import create_playground_routes
from ethph_academy.app_keys import (
    config_key,
    navigation_key,
    renderer_key,
    router_key,
    sessions_key,
    templates_key,
)
from ethph_academy.assets import get_static_dir
from ethph_academy.config import Config
from ethph_academy.core.catalog import DEFAULT_NAVIGATION
from ethph_academy.core.navigation import NavigationTree
from ethph_academy.core.playground import MockCompiler
from ethph_academy.core.renderer import CodeBlockFormatter, TutorialRenderer
from ethph_academy.core.sessions import PlaygroundSessions
from ethph_academy.pages import create_router
from ethph_academy.shell import create_shell_routes
from ethph_academy.templating import create_environment

logger = logging.getLogger(__name__)


def create_app(config: Config, *, compiler: MockCompiler | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        compiler: Compiler for playground sessions (default: built from
            config.playground)

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    if compiler is None:
        compiler = MockCompiler(
            delay=config.playground.compile_delay,
            failure_rate=config.playground.failure_rate,
        )

    code_blocks = CodeBlockFormatter()
    router = create_router()

    app[config_key] = config
    app[router_key] = router
    app[navigation_key] = NavigationTree(DEFAULT_NAVIGATION)
    app[renderer_key] = TutorialRenderer(code_blocks)
    app[templates_key] = create_environment(code_blocks, config.site)
    app[sessions_key] = PlaygroundSessions(compiler, ttl=config.playground.session_ttl)

    # API routes (must be registered first to take precedence over the shell)
    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_config_routes())
    app.router.add_routes(create_playground_routes())

    app.router.add_get("/assets/code.css", _serve_code_css)
    app.router.add_static("/assets", get_static_dir())

    # Shell - must be last to catch all non-API routes
    app.router.add_routes(create_shell_routes())

    app.on_startup.append(_start_sessions)
    app.on_cleanup.append(_stop_sessions)

    logger.info(f"Created application with {len(router)} routes")
    return app


async def _start_sessions(app: web.Application) -> None:
    """Start the session sweeper on application startup."""
    await app[sessions_key].start()


async def _stop_sessions(app: web.Application) -> None:
    """Close playground sessions on application cleanup."""
    await app[sessions_key].stop()


async def _serve_code_css(request: web.Request) -> web.Response:
    """Serve the Pygments stylesheet for highlighted code blocks."""
    stylesheet = request.app[renderer_key].code_blocks.stylesheet
    return web.Response(text=stylesheet, content_type="text/css")


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
