"""Tests for server module."""

from ethph_academy.app_keys import (
    config_key,
    navigation_key,
    renderer_key,
    router_key,
    sessions_key,
    templates_key,
)
from ethph_academy.config import Config
from ethph_academy.core.playground import MockCompiler
from ethph_academy.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        app = create_app(test_config)

        for key in (config_key, router_key, navigation_key, renderer_key, templates_key):
            assert key in app
        assert app[config_key] is test_config
        assert len(app[router_key]) == 31

    def test__compiler__shared_by_sessions(
        self,
        test_config: Config,
        compiler: MockCompiler,
    ) -> None:
        app = create_app(test_config, compiler=compiler)

        _, playground = app[sessions_key].create()

        assert playground.state.template_id == "hello-world"
        assert app[sessions_key].templates.default.id == "hello-world"

    def test__templates__expose_site_branding(self, test_config: Config) -> None:
        app = create_app(test_config)

        assert app[templates_key].globals["site"] is test_config.site
