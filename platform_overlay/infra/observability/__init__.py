"""Observability (structured logging)."""

from platform_overlay.infra.observability.logging import (
    add_context,
    clear_context,
    get_logger,
    setup_logging,
)

__all__ = [
    "add_context",
    "clear_context",
    "get_logger",
    "setup_logging",
]
