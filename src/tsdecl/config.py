"""ContextVar-based default render context for tsdecl.

Holds the RenderContext used when a caller renders without passing one
(``node.render()``, ``node.render_default(...)``, ``render_declarations``).

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Tabs for every render in this context
    set_default_context(RenderContext(indent_unit="\\t"))
    try:
        text = module.render()
    finally:
        reset_default_context()

    # Or use the context manager
    with default_context(RenderContext(suppress_comments=True)):
        text = module.render()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

from tsdecl.context import RenderContext

# Module-level default context (reused, never recreated)
_DEFAULT_CONTEXT: RenderContext = RenderContext()

_default_context: ContextVar[RenderContext] = ContextVar(
    "default_render_context",
    default=_DEFAULT_CONTEXT,
)


def get_default_context() -> RenderContext:
    """Get the current default render context (thread-local)."""
    return _default_context.get()


def set_default_context(context: RenderContext) -> None:
    """Set the default render context for the current context.

    Args:
        context: RenderContext used when no context is passed to render().

    """
    _default_context.set(context)


def reset_default_context() -> None:
    """Reset to the built-in default (depth 0, two-space indents, comments on)."""
    _default_context.set(_DEFAULT_CONTEXT)


@contextmanager
def default_context(context: RenderContext) -> Iterator[None]:
    """Context manager for temporary default context changes.

    Restores the previous default even if an exception is raised.

    Example:
        >>> with default_context(RenderContext(indent_unit="    ")):
        ...     get_default_context().indent_unit
        '    '

    """
    previous = _default_context.get()
    _default_context.set(context)
    try:
        yield
    finally:
        _default_context.set(previous)


__all__ = [
    "default_context",
    "get_default_context",
    "reset_default_context",
    "set_default_context",
]
