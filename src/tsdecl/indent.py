"""Line indentation for rendered declaration text."""

from collections.abc import Callable

from tsdecl.context import RenderContext


def _identity(line: str) -> str:
    return line


def indenter(context: RenderContext) -> Callable[[str], str]:
    """Return a transform that prefixes one line for ``context.depth``.

    Depth 0 yields the identity; otherwise the line gets ``indent_unit``
    repeated ``depth`` times in front of it.
    """
    if context.depth == 0:
        return _identity

    prefix = context.indent_unit * context.depth

    def _indent(line: str) -> str:
        return prefix + line

    return _indent


def indent_lines(text: str, context: RenderContext) -> str:
    """Apply the indenter for ``context`` to every line of ``text``.

    Empty lines are prefixed too, so composing indentation stays linear.
    """
    if context.depth == 0:
        return text
    transform = indenter(context)
    return "\n".join(transform(line) for line in text.split("\n"))


__all__ = ["indent_lines", "indenter"]
