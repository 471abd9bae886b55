"""
Blog-style sample migration showcasing colspec column builders.
"""

from .migrations import blog_tables, create_table_statements, run_demo

__all__ = ["blog_tables", "create_table_statements", "run_demo"]
