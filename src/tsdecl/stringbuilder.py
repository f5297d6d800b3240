"""StringBuilder for O(n) accumulation of rendered statements.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation when a generator emits large declaration
files.

Thread Safety:
StringBuilder instances are local to each render_declarations() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient line accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append_line("export * from './a';")
            >>> sb.append_line("declare module m {\\n}")
            >>> sb.build()
            "export * from './a';\\ndeclare module m {\\n}\\n"

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)
