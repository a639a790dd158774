"""
Tree Renderer
Lowers validated plans into widget instance trees.
"""

from .widgets import (
    Widget,
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
from .renderer import TreeRenderer, WIDGETS, render_plan

__all__ = [
    "Widget",
    "Page",
    "Stack",
    "Section",
    "Sidebar",
    "Navbar",
    "Card",
    "Button",
    "Input",
    "Textarea",
    "Table",
    "EmptyState",
    "Chart",
    "Modal",
    "TreeRenderer",
    "WIDGETS",
    "render_plan",
]
