"""
Common observability utilities.

Re-exports logging helpers from the infra layer so that the overlay and host
modules never import infra internals directly.
"""

from platform_overlay.infra.observability import add_context, clear_context, get_logger

__all__ = [
    "add_context",
    "clear_context",
    "get_logger",
]
