"""Tests for tutorial rendering."""

from pathlib import Path

import pytest
from ethph_academy.core.catalog import TUTORIALS_BY_SLUG, Tutorial
from ethph_academy.core.renderer import CodeBlockFormatter, TutorialRenderer


@pytest.fixture
def tutorial() -> Tutorial:
    return Tutorial(
        slug="sample",
        title="Sample",
        section="Getting Started",
        difficulty="Beginner",
        reading_time="~5 min",
        summary="A sample tutorial.",
    )


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    (tmp_path / "tutorials").mkdir()
    return tmp_path


class TestCodeBlockFormatter:
    """Tests for CodeBlockFormatter.render()."""

    def test__solidity__highlights_code(self) -> None:
        html = CodeBlockFormatter().render("contract A {}", "solidity")

        assert 'class="code-block"' in html
        assert 'data-language="solidity"' in html
        assert "codehilite" in html
        assert "contract" in html

    def test__title__adds_header_with_copy_button(self) -> None:
        html = CodeBlockFormatter().render('string s = "<hi>";', "solidity", "Greeter.sol")

        assert '<span>Greeter.sol</span>' in html
        assert 'class="code-block__copy"' in html
        assert 'data-code="string s = &quot;&lt;hi&gt;&quot;;"' in html

    def test__no_title__omits_header(self) -> None:
        html = CodeBlockFormatter().render("contract A {}")

        assert "code-block__header" not in html

    def test__unknown_language__falls_back_to_plain_text(self) -> None:
        html = CodeBlockFormatter().render("just text", "no-such-language")

        assert "just text" in html
        assert 'data-language="no-such-language"' in html

    def test__line_numbers__can_be_disabled(self) -> None:
        numbered = CodeBlockFormatter().render("a\nb", "text")
        plain = CodeBlockFormatter().render("a\nb", "text", line_numbers=False)

        assert "linenos" in numbered
        assert "linenos" not in plain

    def test__stylesheet__targets_code_class(self) -> None:
        assert ".codehilite" in CodeBlockFormatter().stylesheet


class TestTutorialRenderer:
    """Tests for TutorialRenderer."""

    def test__markdown__renders_headings_and_code(
        self,
        tutorial: Tutorial,
        content_root: Path,
    ) -> None:
        (content_root / "tutorials" / "sample.md").write_text(
            "Intro text.\n\n## Section\n\n```solidity title=A.sol\ncontract A {}\n```\n"
        )
        renderer = TutorialRenderer(content_root=content_root)

        result = renderer.render(tutorial)

        assert "<p>Intro text.</p>" in result.html
        assert "<h2" in result.html and "Section</h2>" in result.html
        assert "<span>A.sol</span>" in result.html

    def test__raw_html__is_escaped(self, tutorial: Tutorial, content_root: Path) -> None:
        (content_root / "tutorials" / "sample.md").write_text("<script>alert(1)</script>\n")

        html = TutorialRenderer(content_root=content_root).render(tutorial).html

        assert "<script>" not in html

    def test__missing_source__raises_file_not_found(
        self,
        tutorial: Tutorial,
        content_root: Path,
    ) -> None:
        with pytest.raises(FileNotFoundError, match="sample.md"):
            TutorialRenderer(content_root=content_root).render(tutorial)

    def test__second_render__is_cached(self, tutorial: Tutorial, content_root: Path) -> None:
        source = content_root / "tutorials" / "sample.md"
        source.write_text("First.\n")
        renderer = TutorialRenderer(content_root=content_root)
        first = renderer.render(tutorial)

        source.write_text("Second.\n")

        assert renderer.render(tutorial) is first

    def test__bundled_introduction__renders(self) -> None:
        result = TutorialRenderer().render(TUTORIALS_BY_SLUG["introduction"])

        assert "What are Smart Contracts?" in result.html
        assert "HelloWorld.sol" in result.html
