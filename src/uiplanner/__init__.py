"""
UI Planner
Natural-language requests to validated UI plans, React source and widget trees.
"""

__version__ = "0.1.0"
