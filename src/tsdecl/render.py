"""Render a sequence of top-level statements into declaration file text.

Example:
    >>> from tsdecl import create_export_all_from, render_declarations
    >>> render_declarations([create_export_all_from("./a"), create_export_all_from("./b")])
    "export * from './a';\\nexport * from './b';\\n"

"""

from collections.abc import Iterable

from tsdecl.config import get_default_context
from tsdecl.context import RenderContext
from tsdecl.nodes import Node
from tsdecl.stringbuilder import StringBuilder
from tsdecl.utils.logger import get_logger

logger = get_logger(__name__)


def render_declarations(
    statements: Iterable[Node],
    context: RenderContext | None = None,
) -> str:
    """Render statements one per line, skipping absent ones.

    Args:
        statements: Top-level nodes, in output order.
        context: Render context (defaults to the active default context).

    Returns:
        The file body. Ends with a newline unless nothing was rendered.

    """
    if context is None:
        context = get_default_context()

    sb = StringBuilder()
    for statement in statements:
        text = statement.render(context)
        if text is None:
            logger.debug("Skipping absent top-level %s", type(statement).__name__)
            continue
        sb.append_line(text)
    return sb.build()


__all__ = ["render_declarations"]
