"""
UI plan schema, validation and diffing.
"""

from .models import (
    NodeKind,
    LayoutStyle,
    ChangeKind,
    CONTAINER_KINDS,
    WIDGET_TAGS,
    UiNode,
    UiLayout,
    UiChange,
    UiPlan,
    flatten_nodes,
    iter_nodes,
    node_ids,
    duplicate_ids,
)
from .validator import PlanValidator, PlanValidationError, validate_plan, validate_plan_result
from .diff import summarize_diff

__all__ = [
    "NodeKind",
    "LayoutStyle",
    "ChangeKind",
    "CONTAINER_KINDS",
    "WIDGET_TAGS",
    "UiNode",
    "UiLayout",
    "UiChange",
    "UiPlan",
    "flatten_nodes",
    "iter_nodes",
    "node_ids",
    "duplicate_ids",
    "PlanValidator",
    "PlanValidationError",
    "validate_plan",
    "validate_plan_result",
    "summarize_diff",
]
