"""Application keys for type-safe app configuration access."""

from aiohttp import web
from jinja2 import Environment

from ethph_academy.config import Config
from ethph_academy.core.navigation import NavigationTree
from ethph_academy.core.renderer import TutorialRenderer
from ethph_academy.core.sessions import PlaygroundSessions
from ethph_academy.router import Router

config_key = web.AppKey("config", Config)
router_key = web.AppKey("router", Router)
navigation_key = web.AppKey("navigation", NavigationTree)
renderer_key = web.AppKey("renderer", TutorialRenderer)
templates_key = web.AppKey("templates", Environment)
sessions_key = web.AppKey("sessions", PlaygroundSessions)
