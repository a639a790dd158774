"""Tree Renderer - validated UiPlan to a widget instance tree."""

from ..core import get_logger
from ..plan.models import CONTAINER_KINDS, WIDGET_TAGS, NodeKind, UiNode, UiPlan
from .widgets import ALL_WIDGETS, Widget


logger = get_logger(__name__)

_BY_TAG = {widget.tag: widget for widget in ALL_WIDGETS}

# Same kind -> widget mapping the code generator uses.
WIDGETS: dict[NodeKind, type[Widget]] = {
    kind: _BY_TAG[tag] for kind, tag in WIDGET_TAGS.items() if tag in _BY_TAG
}

_missing = set(NodeKind) - WIDGETS.keys()
if _missing:
    raise RuntimeError(f"No widget for node kinds: {sorted(k.value for k in _missing)}")

_mismatched = [kind for kind, widget in WIDGETS.items() if widget.container != (kind in CONTAINER_KINDS)]
if _mismatched:
    raise RuntimeError(f"Container flag mismatch for: {sorted(k.value for k in _mismatched)}")


class TreeRenderer:
    """Instantiates widgets for a validated plan."""

    def render(self, plan: UiPlan) -> Widget | None:
        return self.render_node(plan.root)

    def render_node(self, node: UiNode) -> Widget | None:
        """
        Render one node.

        Props are handed through unchanged so widgets apply their own
        defaults. Unsupported kinds render as None.
        """
        widget_cls = WIDGETS.get(node.kind)
        if widget_cls is None:
            logger.debug("unsupported_kind", kind=str(node.kind), node_id=node.id)
            return None

        children: tuple[Widget, ...] = ()
        if widget_cls.container and node.children:
            rendered = (self.render_node(child) for child in node.children)
            children = tuple(child for child in rendered if child is not None)

        return widget_cls(props=node.props, children=children)


def render_plan(plan: UiPlan) -> Widget | None:
    """Convenience function to render a plan's widget tree."""
    return TreeRenderer().render(plan)
