"""HTML shell.

Every page is wrapped in the same layout: header, sidebar, content slot and
footer. Only the content slot varies, and a page that fails to render is
replaced by an inline error panel so the rest of the layout stays usable.
"""

import logging
from datetime import date

from aiohttp import web

from ethph_academy.app_keys import navigation_key, router_key, sessions_key, templates_key
from ethph_academy.core.playground import Playground, UnknownTemplateError
from ethph_academy.pages import SESSION_COOKIE, PageContent

logger = logging.getLogger(__name__)

PLAYGROUND_PATH = "/playground"


def create_shell_routes() -> list[web.RouteDef]:
    # Registered after the API and asset routes; the catch-all must stay last
    return [
        web.post("/playground/template", select_template),
        web.post("/playground/compile", compile_source),
        web.post("/playground/reset", reset_playground),
        web.get("/playground/download", download_source),
        web.get("/{path:.*}", render_page),
    ]


async def render_page(request: web.Request) -> web.Response:
    path = request.path
    resolution = request.app[router_key].resolve(path)
    status = 200 if resolution.found else 404

    try:
        content = await resolution.route.page.render(request)
    except Exception as e:
        logger.exception(f"Failed to render page {path}")
        content = PageContent(
            title="Something went wrong",
            html=request.app[templates_key]
            .get_template("error.html")
            .render(path=path, error=type(e).__name__),
        )
        status = 500

    navigation = request.app[navigation_key]
    html = (
        request.app[templates_key]
        .get_template("base.html")
        .render(
            content=content,
            current_path=path,
            sections=navigation.view(path),
            year=date.today().year,
        )
    )

    response = web.Response(text=html, status=status, content_type="text/html")
    for name, value in content.cookies.items():
        response.set_cookie(name, value, httponly=True, samesite="Lax", path="/")
    return response


def _session_playground(request: web.Request) -> Playground:
    """Get the playground for the session cookie.

    Raises:
        HTTPSeeOther: Back to the playground page when there is no live
            session; loading it mounts a fresh one
    """
    session_id = request.cookies.get(SESSION_COOKIE)
    playground = request.app[sessions_key].get(session_id) if session_id else None
    if playground is None:
        raise request.app[router_key].navigate(PLAYGROUND_PATH)
    return playground


async def select_template(request: web.Request) -> web.Response:
    playground = _session_playground(request)
    form = await request.post()
    template_id = form.get("template_id")
    if not isinstance(template_id, str):
        raise web.HTTPBadRequest(text="template_id is required")

    try:
        playground.select_template(template_id)
    except UnknownTemplateError as e:
        raise web.HTTPBadRequest(text=str(e)) from e

    raise request.app[router_key].navigate(PLAYGROUND_PATH)


async def compile_source(request: web.Request) -> web.Response:
    playground = _session_playground(request)
    form = await request.post()
    source = form.get("source")
    # Edits posted while a compile is running are kept but do not restart it
    if isinstance(source, str):
        playground.edit_source(source.replace("\r\n", "\n"))
    playground.start_compile()
    raise request.app[router_key].navigate(PLAYGROUND_PATH)


async def reset_playground(request: web.Request) -> web.Response:
    playground = _session_playground(request)
    playground.reset()
    raise request.app[router_key].navigate(PLAYGROUND_PATH)


async def download_source(request: web.Request) -> web.Response:
    playground = _session_playground(request)
    return download_response(playground)


def download_response(playground: Playground) -> web.Response:
    download = playground.download()
    return web.Response(
        body=download.body,
        content_type=download.content_type,
        charset="utf-8",
        headers={"Content-Disposition": f'attachment; filename="{download.filename}"'},
    )
