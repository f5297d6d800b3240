"""Immutable render context for tsdecl.

A RenderContext is threaded top-down through a render pass. It carries the
indentation depth plus the formatting options that apply to the whole tree.

Example:
    >>> ctx = RenderContext()
    >>> ctx.deeper().depth
    1
    >>> ctx.deeper().indent_unit == ctx.indent_unit
    True

Thread Safety:
    Frozen dataclass. Safe to share across threads and renders.

"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Immutable rendering environment.

    Attributes:
        depth: Indentation depth applied to every line of the rendered node
        indent_unit: String repeated ``depth`` times in front of each line
        continuation_indent_unit: Prefix for the second and later declarators
            of a multi-declarator variable statement
        suppress_comments: Skip leading comments entirely

    """

    depth: int = 0
    indent_unit: str = "  "
    continuation_indent_unit: str = "  "
    suppress_comments: bool = False

    def __post_init__(self) -> None:
        if self.depth < 0:
            msg = f"depth must be non-negative, got {self.depth}"
            raise ValueError(msg)

    def deeper(self) -> "RenderContext":
        """Return a copy one indentation level deeper."""
        return replace(self, depth=self.depth + 1)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "RenderContext":
        """Create a RenderContext from a mapping of options.

        Only keys that are RenderContext fields are used; unknown keys
        are silently ignored.

        Example:
            >>> RenderContext.from_dict({"indent_unit": "\\t", "other": 1}).indent_unit
            '\\t'

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in options.items() if k in valid_fields}
        return cls(**filtered)


__all__ = ["RenderContext"]
