"""Jinja2 environment for the HTML shell and page templates."""

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from ethph_academy.config import SiteConfig
from ethph_academy.core.renderer import DEFAULT_LANGUAGE, CodeBlockFormatter


def create_environment(code_blocks: CodeBlockFormatter, site: SiteConfig) -> Environment:
    """Create the template environment.

    Templates can call ``code_block(code, language, title)`` to embed a
    highlighted sample, and read ``site`` for branding.
    """
    env = Environment(
        loader=PackageLoader("ethph_academy", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )

    def code_block(
        code: str,
        language: str = DEFAULT_LANGUAGE,
        title: str | None = None,
        line_numbers: bool = True,
    ) -> Markup:
        return Markup(code_blocks.render(code, language, title, line_numbers=line_numbers))

    env.globals["code_block"] = code_block
    env.globals["site"] = site
    return env
