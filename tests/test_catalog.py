"""Tests for bundled site content."""

from importlib.resources import files

from ethph_academy.core.catalog import (
    DEFAULT_NAVIGATION,
    FEATURED_TUTORIALS,
    PROJECTS,
    RESOURCE_CATEGORIES,
    RESOURCES,
    TUTORIALS,
    TUTORIALS_BY_SLUG,
    resources_by_category,
)
from ethph_academy.pages import create_router


class TestTutorials:
    """Tests for the tutorial catalog."""

    def test__catalog__has_twenty_seven_tutorials(self) -> None:
        assert len(TUTORIALS) == 27
        assert len(TUTORIALS_BY_SLUG) == 27

    def test__every_tutorial__has_markdown_source(self) -> None:
        content = files("ethph_academy").joinpath("content", "tutorials")

        missing = [t.slug for t in TUTORIALS if not content.joinpath(f"{t.slug}.md").is_file()]

        assert missing == []

    def test__tutorial_path__uses_slug(self) -> None:
        assert TUTORIALS_BY_SLUG["erc20"].path == "/tutorials/erc20"


class TestNavigation:
    """Tests for the bundled sidebar."""

    def test__sections__keep_authored_order(self) -> None:
        assert [s.title for s in DEFAULT_NAVIGATION] == [
            "Getting Started",
            "Solidity Basics",
            "Smart Contracts",
            "Foundry",
            "Security",
            "Advanced Topics",
            "WAGMI",
        ]

    def test__item_paths__are_unique(self) -> None:
        paths = [item.path for section in DEFAULT_NAVIGATION for item in section.items]

        assert len(paths) == len(set(paths))

    def test__item_paths__are_all_routed(self) -> None:
        """No sidebar link leads to the not-found page."""
        router = create_router()

        unrouted = [
            item.path
            for section in DEFAULT_NAVIGATION
            for item in section.items
            if router.match(item.path) is None
        ]

        assert unrouted == []

    def test__featured_tutorials__are_routed(self) -> None:
        router = create_router()

        assert all(router.match(f.path) is not None for f in FEATURED_TUTORIALS)


class TestResources:
    """Tests for projects and resources."""

    def test__resources__group_by_category_in_order(self) -> None:
        groups = resources_by_category()

        assert [label for label, _ in groups] == list(RESOURCE_CATEGORIES.values())
        assert sum(len(items) for _, items in groups) == len(RESOURCES)

    def test__projects__have_six_entries(self) -> None:
        assert len(PROJECTS) == 6
