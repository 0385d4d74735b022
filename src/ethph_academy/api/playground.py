"""Playground API endpoints.

One session per mounted editor. Compiles run in the background: POST
.../compile answers 202 immediately and clients poll the session until the
status leaves ``compiling``.
"""

import json
from typing import Any

from aiohttp import web

from ethph_academy.app_keys import sessions_key
from ethph_academy.core.playground import Playground, UnknownTemplateError
from ethph_academy.shell import download_response


def create_playground_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/playground/templates", list_templates),
        web.post("/api/playground", create_session),
        web.get("/api/playground/{session_id}", get_session),
        web.delete("/api/playground/{session_id}", close_session),
        web.post("/api/playground/{session_id}/template", select_template),
        web.put("/api/playground/{session_id}/source", edit_source),
        web.post("/api/playground/{session_id}/compile", compile_source),
        web.post("/api/playground/{session_id}/reset", reset_session),
        web.get("/api/playground/{session_id}/download", download_source),
    ]


def _session_json(session_id: str, playground: Playground) -> dict[str, Any]:
    state = playground.state
    return {
        "session": session_id,
        "templateId": state.template_id,
        "sourceText": state.source_text,
        "compile": state.result.to_dict(),
        "canCompile": not state.is_compiling,
    }


def _template_not_found(template_id: str) -> web.Response:
    return web.json_response(
        {"error": "Template not found", "template_id": template_id},
        status=404,
    )


async def _json_body(request: web.Request) -> dict[str, Any]:
    """Read a JSON object body; an empty body reads as {}."""
    if not request.body_exists:
        return {}
    try:
        data = await request.json()
    except ValueError as e:
        raise web.HTTPBadRequest(
            text='{"error": "Invalid JSON body"}',
            content_type="application/json",
        ) from e
    if not isinstance(data, dict):
        raise web.HTTPBadRequest(
            text='{"error": "JSON body must be an object"}',
            content_type="application/json",
        )
    return data


def _lookup(request: web.Request) -> tuple[str, Playground]:
    session_id = request.match_info["session_id"]
    playground = request.app[sessions_key].get(session_id)
    if playground is None:
        raise web.HTTPNotFound(
            text=json.dumps({"error": "Session not found", "session": session_id}),
            content_type="application/json",
        )
    return session_id, playground


async def list_templates(request: web.Request) -> web.Response:
    templates = request.app[sessions_key].templates
    return web.json_response(
        {
            "templates": [
                {"id": t.id, "name": t.name, "description": t.description}
                for t in templates
            ],
        },
    )


async def create_session(request: web.Request) -> web.Response:
    data = await _json_body(request)
    template_id = data.get("template_id")
    if template_id is not None and not isinstance(template_id, str):
        return web.json_response({"error": "template_id must be a string"}, status=400)

    try:
        session_id, playground = request.app[sessions_key].create(template_id)
    except UnknownTemplateError as e:
        return _template_not_found(e.template_id)

    return web.json_response(_session_json(session_id, playground), status=201)


async def get_session(request: web.Request) -> web.Response:
    session_id, playground = _lookup(request)
    return web.json_response(_session_json(session_id, playground))


async def close_session(request: web.Request) -> web.Response:
    session_id, _ = _lookup(request)
    request.app[sessions_key].close(session_id)
    return web.Response(status=204)


async def select_template(request: web.Request) -> web.Response:
    session_id, playground = _lookup(request)
    data = await _json_body(request)
    template_id = data.get("template_id")
    if not isinstance(template_id, str):
        return web.json_response({"error": "template_id is required"}, status=400)

    try:
        playground.select_template(template_id)
    except UnknownTemplateError:
        return _template_not_found(template_id)

    return web.json_response(_session_json(session_id, playground))


async def edit_source(request: web.Request) -> web.Response:
    session_id, playground = _lookup(request)
    data = await _json_body(request)
    source = data.get("source")
    if not isinstance(source, str):
        return web.json_response({"error": "source must be a string"}, status=400)

    playground.edit_source(source)
    return web.json_response(_session_json(session_id, playground))


async def compile_source(request: web.Request) -> web.Response:
    session_id, playground = _lookup(request)
    playground.start_compile()
    return web.json_response(_session_json(session_id, playground), status=202)


async def reset_session(request: web.Request) -> web.Response:
    session_id, playground = _lookup(request)
    playground.reset()
    return web.json_response(_session_json(session_id, playground))


async def download_source(request: web.Request) -> web.Response:
    _, playground = _lookup(request)
    return download_response(playground)
