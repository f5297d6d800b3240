"""Leading comments carried from an original source tree onto declaration nodes.

A comment provider is any object exposing an ordered sequence of comment
records. Records are accepted in several shapes so that generators can pass
their source AST nodes through unchanged:

- ``Comment`` instances
- objects with ``kind`` and ``text`` attributes
- mappings with ``kind``/``text`` keys
- babel-style mappings with ``type``/``value`` keys
  (``"CommentLine"`` / ``"CommentBlock"``)

Unknown kinds are kept as plain strings and render to nothing.

Thread Safety:
    Comment is frozen. All functions are pure.

"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tsdecl.utils.logger import get_logger

logger = get_logger(__name__)


class CommentKind(Enum):
    """Comment syntax to emit."""

    LINE = "Line"  # // text
    BLOCK = "Block"  # /*text*/


# Source spellings understood for each kind
_KIND_ALIASES: dict[str, CommentKind] = {
    "Line": CommentKind.LINE,
    "Block": CommentKind.BLOCK,
    "CommentLine": CommentKind.LINE,
    "CommentBlock": CommentKind.BLOCK,
}

# Where a source node may keep its comments, in lookup order
_SOURCE_KEYS = ("leading_comments", "leadingComments", "comments")


@dataclass(frozen=True, slots=True)
class Comment:
    """A single leading comment.

    ``text`` is emitted verbatim: line comments get ``// `` in front,
    block comments are wrapped in ``/*`` and ``*/`` with no added spacing.

    """

    kind: CommentKind | str
    text: str

    @classmethod
    def line(cls, text: str) -> "Comment":
        return cls(CommentKind.LINE, text)

    @classmethod
    def block(cls, text: str) -> "Comment":
        return cls(CommentKind.BLOCK, text)


def normalize_kind(kind: CommentKind | str) -> CommentKind | str:
    """Map a source kind spelling onto CommentKind, keeping unknown ones as-is."""
    if isinstance(kind, CommentKind):
        return kind
    return _KIND_ALIASES.get(kind, kind)


def to_comment(record: Any) -> Comment:
    """Coerce one comment record into a Comment."""
    if isinstance(record, Comment):
        return Comment(normalize_kind(record.kind), record.text)
    if isinstance(record, Mapping):
        kind = record.get("kind", record.get("type", ""))
        text = record.get("text", record.get("value", ""))
    else:
        kind = getattr(record, "kind", getattr(record, "type", ""))
        text = getattr(record, "text", getattr(record, "value", ""))
    return Comment(normalize_kind(kind), text)


def comments_from_source(source: Any) -> tuple[Comment, ...] | None:
    """Extract the ordered leading comments of a source node.

    Returns None when the source exposes no comment sequence at all.
    """
    if source is None:
        return None

    records: Iterable[Any] | None = None
    for key in _SOURCE_KEYS:
        if isinstance(source, Mapping):
            records = source.get(key)
        else:
            records = getattr(source, key, None)
        if records is not None:
            break

    if records is None:
        return None
    return tuple(to_comment(record) for record in records)


def render_comment(comment: Comment) -> str | None:
    """Render one comment, or None for an unrecognized kind."""
    match comment.kind:
        case CommentKind.LINE:
            return f"// {comment.text}"
        case CommentKind.BLOCK:
            return f"/*{comment.text}*/"
        case _:
            logger.debug("Dropping comment of unknown kind %r", comment.kind)
            return None


def render_comments(comments: Iterable[Comment]) -> list[str]:
    """Render comments in order, skipping unrecognized kinds."""
    return [line for c in comments if (line := render_comment(c)) is not None]


__all__ = [
    "Comment",
    "CommentKind",
    "comments_from_source",
    "normalize_kind",
    "render_comment",
    "render_comments",
    "to_comment",
]
