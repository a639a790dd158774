"""Widget prop contracts.

Each widget declares its tag, whether it accepts children, and its own
prop defaults. Rendering happens elsewhere; these are instance nodes.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class Widget:
    """Base widget instance."""

    tag: ClassVar[str] = ""
    container: ClassVar[bool] = False
    defaults: ClassVar[dict[str, Any]] = {}
    required: ClassVar[tuple[str, ...]] = ()

    props: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["Widget", ...] = ()

    def resolved_props(self) -> dict[str, Any]:
        """Props with the widget's defaults filled in under explicit values."""
        resolved = dict(self.defaults)
        resolved.update((key, value) for key, value in self.props.items() if value is not None)
        return resolved

    def missing_props(self) -> list[str]:
        """Required props that are absent after defaulting."""
        resolved = self.resolved_props()
        return [name for name in self.required if name not in resolved]

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "Widget"]]:
        """Yield (depth, widget) pairs in pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tag": self.tag, "props": dict(self.props)}
        if self.container:
            data["children"] = [child.to_dict() for child in self.children]
        return data


# Layout


@dataclass(frozen=True)
class Page(Widget):
    """Top-level page with optional title and description."""

    tag: ClassVar[str] = "Page"
    container: ClassVar[bool] = True


@dataclass(frozen=True)
class Stack(Widget):
    tag: ClassVar[str] = "Stack"
    container: ClassVar[bool] = True
    defaults: ClassVar[dict[str, Any]] = {"direction": "vertical", "gap": "md"}


@dataclass(frozen=True)
class Section(Widget):
    tag: ClassVar[str] = "Section"
    container: ClassVar[bool] = True


@dataclass(frozen=True)
class Sidebar(Widget):
    tag: ClassVar[str] = "Sidebar"
    container: ClassVar[bool] = True


@dataclass(frozen=True)
class Navbar(Widget):
    """Title bar; ``right`` holds trailing content."""

    tag: ClassVar[str] = "Navbar"


# Primitives


@dataclass(frozen=True)
class Card(Widget):
    tag: ClassVar[str] = "Card"
    container: ClassVar[bool] = True


@dataclass(frozen=True)
class Button(Widget):
    tag: ClassVar[str] = "Button"
    defaults: ClassVar[dict[str, Any]] = {"variant": "primary", "size": "md"}
    required: ClassVar[tuple[str, ...]] = ("label",)


@dataclass(frozen=True)
class Input(Widget):
    tag: ClassVar[str] = "Input"


@dataclass(frozen=True)
class Textarea(Widget):
    tag: ClassVar[str] = "Textarea"


# Data


@dataclass(frozen=True)
class Table(Widget):
    """Columns are ``{id, label}``; rows are ``{id, cells}`` keyed by column id."""

    tag: ClassVar[str] = "Table"
    defaults: ClassVar[dict[str, Any]] = {"emptyMessage": "No data"}
    required: ClassVar[tuple[str, ...]] = ("columns", "rows")


@dataclass(frozen=True)
class EmptyState(Widget):
    tag: ClassVar[str] = "EmptyState"


@dataclass(frozen=True)
class Chart(Widget):
    """Series are ``{id, label, values}``."""

    tag: ClassVar[str] = "Chart"
    required: ClassVar[tuple[str, ...]] = ("series",)


# Overlay


@dataclass(frozen=True)
class Modal(Widget):
    tag: ClassVar[str] = "Modal"
    defaults: ClassVar[dict[str, Any]] = {"triggerLabel": "Open"}


ALL_WIDGETS: tuple[type[Widget], ...] = (
    Page,
    Stack,
    Section,
    Sidebar,
    Navbar,
    Card,
    Button,
    Input,
    Textarea,
    Table,
    EmptyState,
    Chart,
    Modal,
)
