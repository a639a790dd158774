"""Identifier-set diff between two plans.

Detects structural additions and removals only. Moves, renames and
prop-only edits fall through to the generic message.
"""

from .models import UiPlan, node_ids


INITIAL_SUMMARY = "Created initial layout using components based on the instruction."
UNCHANGED_SUMMARY = "Adjusted props and layout while keeping the same set of nodes."


def _unique(ids: list[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def summarize_diff(previous: UiPlan | None, next_plan: UiPlan) -> str:
    """
    Summarize how ``next_plan`` differs from ``previous``.

    Args:
        previous: Prior plan, or None for a first generation
        next_plan: Newly validated plan

    Returns:
        Human-readable change summary
    """
    if previous is None:
        return INITIAL_SUMMARY

    before = _unique(node_ids(previous.root))
    after = _unique(node_ids(next_plan.root))
    before_set, after_set = set(before), set(after)

    added = [node_id for node_id in after if node_id not in before_set]
    removed = [node_id for node_id in before if node_id not in after_set]

    parts = []
    if added:
        parts.append(f"Added nodes: {', '.join(added)}")
    if removed:
        parts.append(f"Removed nodes: {', '.join(removed)}")
    if not parts:
        parts.append(UNCHANGED_SUMMARY)
    return " | ".join(parts)
