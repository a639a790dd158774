"""UI Plan Data Models."""

from collections import Counter
from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Closed vocabulary of node kinds."""

    PAGE = "page"
    STACK = "stack"
    SECTION = "section"
    SIDEBAR = "sidebar"
    NAVBAR = "navbar"
    CARD = "card"
    BUTTON = "button"
    INPUT = "input"
    TEXTAREA = "textarea"
    TABLE = "table"
    EMPTY_STATE = "empty-state"
    CHART = "chart"
    MODAL = "modal"


class LayoutStyle(str, Enum):
    """Advisory layout style of a plan."""

    DASHBOARD = "dashboard"
    FORM = "form"
    TABLE = "table"
    CUSTOM = "custom"


class ChangeKind(str, Enum):
    """Kind of an advisory change-log entry."""

    ADD = "add"
    REMOVE = "remove"
    UPDATE = "update"


# Kinds whose children are lowered; every other kind is a leaf.
CONTAINER_KINDS = frozenset(
    {NodeKind.PAGE, NodeKind.STACK, NodeKind.SECTION, NodeKind.SIDEBAR, NodeKind.CARD}
)

# Kind -> widget/tag name, shared by the code generator and the renderer.
WIDGET_TAGS: dict[NodeKind, str] = {
    NodeKind.PAGE: "Page",
    NodeKind.STACK: "Stack",
    NodeKind.SECTION: "Section",
    NodeKind.SIDEBAR: "Sidebar",
    NodeKind.NAVBAR: "Navbar",
    NodeKind.CARD: "Card",
    NodeKind.BUTTON: "Button",
    NodeKind.INPUT: "Input",
    NodeKind.TEXTAREA: "Textarea",
    NodeKind.TABLE: "Table",
    NodeKind.EMPTY_STATE: "EmptyState",
    NodeKind.CHART: "Chart",
    NodeKind.MODAL: "Modal",
}


class PlanModel(BaseModel):
    """Immutable base for plan values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class UiNode(PlanModel):
    """One node of a UI tree."""

    id: str = Field(..., min_length=1)
    kind: NodeKind
    props: dict[str, Any] = Field(default_factory=dict)
    children: list["UiNode"] | None = Field(default=None)

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with absent fields omitted."""
        data: dict[str, Any] = {"id": self.id, "kind": _kind_value(self.kind), "props": dict(self.props)}
        if self.children is not None:
            data["children"] = [child.to_wire() for child in self.children]
        return data


class UiLayout(PlanModel):
    """Advisory layout metadata; not enforced against the tree."""

    layout_style: LayoutStyle = Field(..., alias="layoutStyle")
    has_sidebar: bool | None = Field(default=None, alias="hasSidebar")
    has_navbar: bool | None = Field(default=None, alias="hasNavbar")

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"layoutStyle": self.layout_style.value}
        if self.has_sidebar is not None:
            data["hasSidebar"] = self.has_sidebar
        if self.has_navbar is not None:
            data["hasNavbar"] = self.has_navbar
        return data


class UiChange(PlanModel):
    """Advisory change-log entry; never verified against the actual diff."""

    kind: ChangeKind
    target_id: str | None = Field(default=None, alias="targetId")
    description: str

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value, "description": self.description}
        if self.target_id is not None:
            data["targetId"] = self.target_id
        return data


class UiPlan(PlanModel):
    """Root artifact of one generation step."""

    summary: str = Field(default="")
    layout: UiLayout
    root: UiNode
    changes: list[UiChange] | None = Field(default=None)

    def to_wire(self) -> dict[str, Any]:
        """Camel-cased JSON-ready dict, as sent to the oracle and HTTP clients."""
        data: dict[str, Any] = {
            "summary": self.summary,
            "layout": self.layout.to_wire(),
            "root": self.root.to_wire(),
        }
        if self.changes is not None:
            data["changes"] = [change.to_wire() for change in self.changes]
        return data


UiNode.model_rebuild()


def _kind_value(kind: NodeKind | str) -> str:
    return kind.value if isinstance(kind, NodeKind) else str(kind)


def flatten_nodes(root: UiNode) -> list[UiNode]:
    """Return every node of the tree in pre-order."""
    return list(iter_nodes(root))


def iter_nodes(root: UiNode) -> Iterator[UiNode]:
    yield root
    for child in root.children or ():
        yield from iter_nodes(child)


def node_ids(root: UiNode) -> list[str]:
    """Node ids in pre-order, duplicates retained."""
    return [node.id for node in iter_nodes(root)]


def duplicate_ids(root: UiNode) -> list[str]:
    """Ids that occur more than once, in first-seen order."""
    counts = Counter(node_ids(root))
    return [node_id for node_id, count in counts.items() if count > 1]
