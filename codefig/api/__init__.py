"""API module for codefig.

Functions defined here back both the Jinja2 extension and the CLI commands.
"""

__all__ = []
