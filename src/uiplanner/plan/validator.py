"""Plan Validator - arbitrary JSON to a trusted UiPlan.

Two modes apply to different parts of the same schema:

* strict: ``layout`` and the node tree. Any violation raises
  ``PlanValidationError`` naming the offending path; nothing is repaired.
* lenient: the advisory ``changes`` log. Malformed entries are dropped.
"""

from typing import Any

from returns.result import Result, Success, Failure

from ..core.validate import ValidationError
from .models import ChangeKind, LayoutStyle, NodeKind, UiChange, UiLayout, UiNode, UiPlan


_NODE_KINDS = frozenset(kind.value for kind in NodeKind)
_LAYOUT_STYLES = frozenset(style.value for style in LayoutStyle)
_CHANGE_KINDS = frozenset(kind.value for kind in ChangeKind)


class PlanValidationError(ValidationError, ValueError):
    """Structural schema violation at ``path``."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


def is_record(value: Any) -> bool:
    """True for JSON objects (non-null, non-array mappings)."""
    return isinstance(value, dict)


class PlanValidator:
    """Validates and canonicalizes raw plan data."""

    def validate(self, raw: Any) -> UiPlan:
        """
        Validate a plan.

        Args:
            raw: Parsed JSON (or an existing UiPlan, which is re-validated)

        Returns:
            Canonical UiPlan

        Raises:
            PlanValidationError: On any structural violation
        """
        if isinstance(raw, UiPlan):
            raw = raw.to_wire()

        if not is_record(raw):
            raise PlanValidationError("UiPlan must be an object", "plan")

        summary = raw.get("summary")
        if not isinstance(summary, str):
            summary = ""

        return UiPlan(
            summary=summary,
            layout=self._validate_layout(raw.get("layout")),
            root=self.validate_node(raw.get("root"), "root"),
            changes=self._filter_changes(raw.get("changes")),
        )

    def _validate_layout(self, raw: Any) -> UiLayout:
        if not is_record(raw):
            raise PlanValidationError("UiPlan.layout must be an object", "layout")

        layout_style = raw.get("layoutStyle")
        if not isinstance(layout_style, str) or layout_style not in _LAYOUT_STYLES:
            raise PlanValidationError(
                "UiPlan.layout.layoutStyle must be one of dashboard|form|table|custom",
                "layout.layoutStyle",
            )

        # Mistyped flags are dropped, not rejected
        has_sidebar = raw.get("hasSidebar")
        has_navbar = raw.get("hasNavbar")
        return UiLayout(
            layout_style=LayoutStyle(layout_style),
            has_sidebar=has_sidebar if isinstance(has_sidebar, bool) else None,
            has_navbar=has_navbar if isinstance(has_navbar, bool) else None,
        )

    def validate_node(self, raw: Any, path: str) -> UiNode:
        """Strictly validate one node and, recursively, its children."""
        if not is_record(raw):
            raise PlanValidationError(f"UiNode at {path} must be an object", path)

        node_id = raw.get("id")
        if not isinstance(node_id, str) or not node_id.strip():
            raise PlanValidationError(f"UiNode at {path} is missing a valid id", path)

        kind = raw.get("kind")
        if not isinstance(kind, str) or kind not in _NODE_KINDS:
            raise PlanValidationError(f'UiNode at {path} has unsupported kind "{kind}"', path)

        props = raw.get("props")
        props = dict(props) if is_record(props) else {}

        children = None
        raw_children = raw.get("children")
        if isinstance(raw_children, list):
            children = [
                self.validate_node(child, f"{path}.children[{index}]")
                for index, child in enumerate(raw_children)
            ]

        return UiNode(id=node_id.strip(), kind=NodeKind(kind), props=props, children=children)

    def _filter_changes(self, raw: Any) -> list[UiChange] | None:
        if not isinstance(raw, list):
            return None

        changes = []
        for entry in raw:
            if not is_record(entry):
                continue
            kind = entry.get("kind")
            if not isinstance(kind, str) or kind not in _CHANGE_KINDS:
                continue
            description = entry.get("description")
            if not isinstance(description, str) or not description.strip():
                continue
            target_id = entry.get("targetId")
            changes.append(
                UiChange(
                    kind=ChangeKind(kind),
                    target_id=target_id if isinstance(target_id, str) else None,
                    description=description.strip(),
                )
            )
        return changes


_validator = PlanValidator()


def validate_plan(raw: Any) -> UiPlan:
    """Convenience function to validate raw plan data."""
    return _validator.validate(raw)


def validate_plan_result(raw: Any) -> Result[UiPlan, PlanValidationError]:
    """Validate raw plan data (Result pattern version)."""
    try:
        return Success(_validator.validate(raw))
    except PlanValidationError as e:
        return Failure(e)
