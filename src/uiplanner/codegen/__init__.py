"""
Code Generator
Lowers validated plans into React source text.
"""

from .generator import ReactCodeGenerator, generate_code, render_prop_value, render_props, HEADER_IMPORTS

__all__ = ["ReactCodeGenerator", "generate_code", "render_prop_value", "render_props", "HEADER_IMPORTS"]
