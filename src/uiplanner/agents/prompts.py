"""
Prompt Builder
Centralized prompt construction for the planner and explainer calls.
"""

from ..core import safe_json_dumps
from ..plan.models import NodeKind, UiPlan


RETRY_INSTRUCTION = (
    "Your previous response was not strict JSON. Reply again with ONLY a JSON object."
)


def _kind_union() -> list[str]:
    kinds = [f'  | "{kind.value}"' for kind in NodeKind]
    kinds[-1] += ";"
    return ["type NodeKind ="] + kinds


PLANNER_SYSTEM_PROMPT = "\n".join(
    [
        "You are a UI planner for a deterministic React UI generator.",
        "You MUST obey these rules:",
        f"- Use ONLY the allowed node kinds: {', '.join(kind.value for kind in NodeKind)}.",
        "- Never invent new node kinds or props that look like CSS or style attributes.",
        "- Do NOT use inline styles, CSS, class names, or Tailwind utilities. The renderer controls all styling.",
        "- You are not allowed to change or extend the component library.",
        "- You must preserve existing layout and node ids unless the user clearly asks for a full redesign.",
        "",
        "Output format:",
        "- You MUST return a single JSON object that matches the UiPlan schema.",
        "- Do NOT include any explanations, comments, or markdown.",
        "",
        "UiPlan schema (TypeScript-style):",
        *_kind_union(),
        "",
        "type UiNode = {",
        "  id: string;",
        "  kind: NodeKind;",
        "  props?: Record<string, unknown>;",
        "  children?: UiNode[];  // only for page, stack, section, sidebar, card",
        "};",
        "",
        "type UiPlan = {",
        "  summary: string;",
        "  layout: {",
        "    hasSidebar?: boolean;",
        "    hasNavbar?: boolean;",
        '    layoutStyle: "dashboard" | "form" | "table" | "custom";',
        "  };",
        "  root: UiNode;",
        "  changes?: {",
        '    kind: "add" | "remove" | "update";',
        "    targetId?: string;",
        "    description: string;",
        "  }[];",
        "};",
        "",
        "Never output anything except this JSON object.",
    ]
)

EXPLAINER_SYSTEM_PROMPT = "\n".join(
    [
        "You are an assistant explaining UI layout decisions to a front-end engineer.",
        "Explain changes between the previous and next plan, referencing components by name.",
        "Mention what stayed the same vs what changed.",
        "Do not talk about JSON or schemas; describe the UI.",
        "Do not claim to change the component library or styling rules.",
    ]
)


class PromptBuilder:
    """Builds planner and explainer prompts."""

    @staticmethod
    def planner_system() -> str:
        return PLANNER_SYSTEM_PROMPT

    @staticmethod
    def planner_user(message: str, mode: str, current_plan: UiPlan | None = None) -> str:
        """
        Build the planner user prompt.

        Args:
            message: Sanitized user instruction
            mode: initial, modify or regenerate
            current_plan: Plan to update, if any

        Returns:
            Prompt text
        """
        parts = [
            "User instruction:",
            message,
            "",
            f"Mode: {mode}",
            "",
            "Current plan (if any) as JSON:",
        ]

        if current_plan is not None:
            parts.append(safe_json_dumps(current_plan.to_wire(), indent=2))
            parts.extend(
                [
                    "",
                    "Update this plan minimally to satisfy the new instruction.",
                    "Reuse existing node ids whenever possible.",
                ]
            )
        else:
            parts.extend(["null", "", "Create a new plan for this instruction."])

        return "\n".join(parts)

    @staticmethod
    def planner_retry(user_prompt: str) -> str:
        return f"{user_prompt}\n\n{RETRY_INSTRUCTION}"

    @staticmethod
    def explainer_system() -> str:
        return EXPLAINER_SYSTEM_PROMPT

    @staticmethod
    def explainer_user(message: str, diff_summary: str) -> str:
        return "\n".join(
            [
                "Latest user instruction:",
                message,
                "",
                "High-level diff between previous and next plan:",
                diff_summary,
            ]
        )
