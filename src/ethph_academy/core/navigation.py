"""Sidebar navigation tree.

Static sections of ordered links. Each section carries an independent
expanded/collapsed flag; toggling produces a new tree so views never share
mutable state. Highlighting compares paths by exact string equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict

from ethph_academy.core.types import URLPath


class NavItemDict(TypedDict):
    """Dictionary representation of a rendered navigation item."""

    title: str
    path: str
    active: bool


class NavSectionDict(TypedDict):
    """Dictionary representation of a rendered navigation section."""

    title: str
    icon: str
    expanded: bool
    items: list[NavItemDict]


@dataclass(frozen=True)
class NavigationItem:
    """Single sidebar link."""

    title: str
    path: URLPath


@dataclass(frozen=True)
class NavigationSection:
    """Collapsible group of sidebar links.

    ``expanded`` is the authored default; the live flag is held by
    NavigationTree.
    """

    title: str
    icon: str
    items: tuple[NavigationItem, ...] = ()
    expanded: bool = False


@dataclass(frozen=True)
class ItemView:
    """Navigation item as rendered for a given current path."""

    title: str
    path: URLPath
    active: bool

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        return {"title": self.title, "path": self.path, "active": self.active}


@dataclass(frozen=True)
class SectionView:
    """Navigation section as rendered for a given current path."""

    title: str
    icon: str
    expanded: bool
    items: list[ItemView] = field(default_factory=list)

    def to_dict(self) -> NavSectionDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "icon": self.icon,
            "expanded": self.expanded,
            "items": [item.to_dict() for item in self.items],
        }


class NavigationTree:
    """Immutable navigation tree with per-section expansion state.

    Expansion flags are keyed by section title rather than position, so a
    flag always follows its section. Section and item order is exactly the
    input order.
    """

    __slots__ = ("_expanded", "_sections")

    def __init__(
        self,
        sections: list[NavigationSection] | tuple[NavigationSection, ...],
        expanded: dict[str, bool] | None = None,
    ) -> None:
        """Initialize the tree.

        Args:
            sections: Static section configuration, in display order
            expanded: Expansion flags by section title; defaults to each
                      section's authored ``expanded`` value

        Raises:
            ValueError: If two sections share a title
        """
        titles = [section.title for section in sections]
        duplicates = sorted({title for title in titles if titles.count(title) > 1})
        if duplicates:
            raise ValueError(f"Duplicate navigation section titles: {', '.join(duplicates)}")

        self._sections = tuple(sections)
        if expanded is None:
            expanded = {section.title: section.expanded for section in self._sections}
        self._expanded = dict(expanded)

    @property
    def sections(self) -> tuple[NavigationSection, ...]:
        """Sections in display order."""
        return self._sections

    def is_expanded(self, index: int) -> bool:
        """Return the expansion flag of the section at ``index``."""
        return self._expanded[self._sections[index].title]

    def toggle_section(self, index: int) -> NavigationTree:
        """Return a new tree with one section's expansion flag flipped.

        Args:
            index: Position of the section in display order

        Returns:
            New NavigationTree; this tree is left unchanged

        Raises:
            IndexError: If index does not address a section
        """
        if not 0 <= index < len(self._sections):
            raise IndexError(f"Navigation section index out of range: {index}")

        title = self._sections[index].title
        expanded = dict(self._expanded)
        expanded[title] = not expanded[title]
        return NavigationTree(self._sections, expanded)

    @staticmethod
    def is_active(path: str, current_path: str) -> bool:
        """Check whether a link path is the current route.

        Exact string comparison only: no prefix matching and no trailing
        slash normalisation.
        """
        return path == current_path

    def view(self, current_path: str) -> list[SectionView]:
        """Render sections and items for the given current path."""
        return [
            SectionView(
                title=section.title,
                icon=section.icon,
                expanded=self._expanded[section.title],
                items=[
                    ItemView(
                        title=item.title,
                        path=item.path,
                        active=self.is_active(item.path, current_path),
                    )
                    for item in section.items
                ],
            )
            for section in self._sections
        ]

    def items(self) -> list[NavigationItem]:
        """Flatten all items in sidebar order."""
        return [item for section in self._sections for item in section.items]

    def section_for(self, path: str) -> NavigationSection | None:
        """Get the section containing an item with ``path``."""
        for section in self._sections:
            if any(item.path == path for item in section.items):
                return section
        return None

    def neighbours(
        self,
        path: str,
    ) -> tuple[NavigationItem | None, NavigationItem | None]:
        """Get the previous and next items around ``path`` in sidebar order.

        Returns:
            (previous, next); either is None at the ends of the learning path,
            and both are None when ``path`` is not in the tree
        """
        items = self.items()
        for idx, item in enumerate(items):
            if item.path == path:
                previous = items[idx - 1] if idx > 0 else None
                following = items[idx + 1] if idx + 1 < len(items) else None
                return previous, following
        return None, None
