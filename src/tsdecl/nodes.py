"""Typed declaration nodes for tsdecl.

All nodes are frozen dataclasses with slots for:
- Immutability: a tree can be rendered any number of times, from any thread
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally (see visitor.py)

Node Hierarchy:
Node (base)
├── Statements
│   ├── ModuleDeclaration
│   ├── ExportAllFrom
│   ├── ExportNamedDeclaration
│   ├── Export
│   ├── VariableDeclaration
│   ├── FunctionDeclaration
│   ├── InterfaceDeclaration
│   └── ClassDeclaration
├── Interface members
│   ├── InterfaceMethod
│   ├── InterfaceProperty
│   └── InterfaceIndexer
├── Class members
│   ├── ClassConstructor
│   ├── ClassMethod
│   └── ClassProperty
└── Parts
    ├── VariableDeclarator
    ├── ExportSpecifier
    └── Parameter

Rendering:
``Node.render(context)`` renders the node body and its comment block in a
depth-0 frame, then indents every resulting line by ``context.depth``.
Container bodies render their children at ``frame.deeper()``, so each
nesting level adds exactly one indent unit. A body never indents its own
first line.

A body may return None: the node is an absent statement (an empty
VariableDeclaration) and every container skips it.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from tsdecl.comments import Comment, comments_from_source, render_comments
from tsdecl.config import get_default_context
from tsdecl.context import RenderContext
from tsdecl.errors import AbstractNodeError
from tsdecl.indent import indent_lines
from tsdecl.utils.logger import get_logger

logger = get_logger(__name__)

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all declaration nodes.

    Every node may carry leading comments copied from an original source
    node. Subclasses implement ``body``.

    """

    comments: tuple[Comment, ...] | None = field(default=None, kw_only=True)

    # Consulted by ExportNamedDeclaration; only classes end without ';'
    no_trailing_semicolon: ClassVar[bool] = False

    def from_source(self, source: Any) -> Self:
        """Return this node carrying the leading comments of ``source``.

        Attaching again replaces the previous comments. The receiver is
        unchanged; use the returned node.
        """
        return dataclasses.replace(self, comments=comments_from_source(source))

    def render(self, context: RenderContext | None = None) -> str | None:
        """Render to declaration text, or None for an absent statement."""
        if context is None:
            context = get_default_context()
        frame = context if context.depth == 0 else dataclasses.replace(context, depth=0)

        body = self.body(frame)
        if body is None:
            return None
        return indent_lines(self.comment_block(frame) + body, context)

    def render_default(self, **overrides: Any) -> str | None:
        """Render with ``overrides`` merged over the default context.

        Example:
            >>> Parameter("n", "number").render_default(depth=1)
            '  n: number'

        """
        base = dataclasses.asdict(get_default_context())
        return self.render(RenderContext.from_dict({**base, **overrides}))

    def comment_block(self, context: RenderContext) -> str:
        """Leading comments on their own lines, or ``""``."""
        if context.suppress_comments or not self.includes_comments():
            return ""
        if not self.comments:
            return ""

        lines = render_comments(self.comments)
        if not lines:
            return ""
        return "\n" + "\n".join(lines) + "\n"

    def includes_comments(self) -> bool:
        return True

    def body(self, context: RenderContext) -> str | None:
        """Type-specific rendering hook. Must not indent its first line."""
        raise AbstractNodeError(type(self).__name__)


# =============================================================================
# Rendering helpers
# =============================================================================


def _render_all(nodes: tuple[Node, ...], context: RenderContext) -> list[str]:
    """Render nodes in order, skipping absent ones."""
    rendered: list[str] = []
    for node in nodes:
        text = node.render(context)
        if text is None:
            logger.debug("Skipping absent %s", type(node).__name__)
            continue
        rendered.append(text)
    return rendered


def _render_inline(item: str | Node, context: RenderContext) -> str:
    if isinstance(item, Node):
        return item.render(context) or ""
    return item


def _render_block(header: str, members: tuple[Node, ...], context: RenderContext) -> str:
    """``header {`` + members one per line at the next depth + ``}``."""
    lines = _render_all(members, context.deeper())
    if not lines:
        return f"{header} {{\n}}"
    inner = "\n".join(lines)
    return f"{header} {{\n{inner}\n}}"


def render_method_signature(
    name: str,
    params: tuple[Parameter, ...],
    return_type: str | None,
    context: RenderContext,
) -> str:
    """Shared ``name(params): type`` rendering.

    Parameters render at the same depth as the signature. The return
    annotation is omitted when ``return_type`` is None.
    """
    rendered = ", ".join(_render_all(params, context))
    annotation = f": {return_type}" if return_type is not None else ""
    return f"{name}({rendered}){annotation}"


def _static_prefix(is_static: bool) -> str:
    return "static " if is_static else ""


# =============================================================================
# Statements
# =============================================================================


@dataclass(frozen=True, slots=True)
class ModuleDeclaration(Node):
    """Ambient module.

    Renders: declare module <name> {
               <children>
             }

    """

    name: str
    children: tuple[Node, ...]

    def body(self, context: RenderContext) -> str:
        return _render_block(f"declare module {self.name}", self.children, context)


@dataclass(frozen=True, slots=True)
class ExportAllFrom(Node):
    """Re-export everything from another module.

    Renders: export * from '<source>';

    """

    source: str

    def body(self, context: RenderContext) -> str:
        return f"export * from '{self.source}';"


@dataclass(frozen=True, slots=True)
class ExportNamedDeclaration(Node):
    """Exported declaration.

    Renders: export <declaration>;

    The declaration is rendered at depth 0 and the trailing ``;`` is left
    off when the declaration has ``no_trailing_semicolon``.

    """

    declaration: Node

    def body(self, context: RenderContext) -> str | None:
        decl = self.declaration.render(context)
        if decl is None:
            return None
        suffix = "" if self.declaration.no_trailing_semicolon else ";"
        return f"export {decl}{suffix}"


@dataclass(frozen=True, slots=True)
class VariableDeclaration(Node):
    """Variable statement with one or more declarators.

    Renders: let x: number,
               y: string

    Declarators that render empty are dropped. With none left the whole
    statement is absent (body returns None).

    """

    kind: str
    declarators: tuple[Node, ...]

    def body(self, context: RenderContext) -> str | None:
        declarators = [d for d in _render_all(self.declarators, context) if d]
        if not declarators:
            return None

        first, *rest = declarators
        continued = [context.continuation_indent_unit + d for d in rest]
        return f"{self.kind} " + ",\n".join([first, *continued])


@dataclass(frozen=True, slots=True)
class Export(Node):
    """Export list, optionally re-exported from another module.

    Renders: export {
               a,
               b as c
             } from '<source>';

    """

    specifiers: tuple[ExportSpecifier, ...]
    source: str | None = None

    def body(self, context: RenderContext) -> str:
        specifiers = ",\n".join(_render_all(self.specifiers, context.deeper()))
        inner = f"\n{specifiers}\n" if specifiers else "\n"
        if self.source:
            return f"export {{{inner}}} from '{self.source}';"
        return f"export {{{inner}}};"


@dataclass(frozen=True, slots=True)
class FunctionDeclaration(Node):
    """Function signature.

    Renders: function <name>(<params>): <type>

    """

    name: str
    params: tuple[Parameter, ...]
    type_text: str | None

    def body(self, context: RenderContext) -> str:
        return "function " + render_method_signature(
            self.name, self.params, self.type_text, context
        )


@dataclass(frozen=True, slots=True)
class InterfaceDeclaration(Node):
    """Exported interface.

    Renders: export interface <name> extends <bases> {
               <members>
             }

    Base interfaces may be plain strings or nodes rendered at depth 0.
    Bases that render empty or absent are left out.

    """

    name: str
    members: tuple[Node, ...]
    base_interfaces: tuple[str | Node, ...] = ()

    def body(self, context: RenderContext) -> str:
        rendered = (_render_inline(base, context) for base in self.base_interfaces)
        bases = ", ".join(base for base in rendered if base)
        extends = f" extends {bases}" if bases else ""
        return _render_block(f"export interface {self.name}{extends}", self.members, context)


@dataclass(frozen=True, slots=True)
class ClassDeclaration(Node):
    """Class shape.

    Renders: class <name> extends <super> {
               <members>
             }

    """

    name: str
    super_name: str | None
    members: tuple[Node, ...]

    no_trailing_semicolon: ClassVar[bool] = True

    def body(self, context: RenderContext) -> str:
        extends = f" extends {self.super_name}" if self.super_name else ""
        return _render_block(f"class {self.name}{extends}", self.members, context)


# =============================================================================
# Interface members
# =============================================================================


@dataclass(frozen=True, slots=True)
class InterfaceMethod(Node):
    """Interface method signature.

    Renders: static <name>?(<params>): <type>;

    """

    name: str
    params: tuple[Parameter, ...]
    type_text: str | None
    is_static: bool = False
    is_optional: bool = False

    def body(self, context: RenderContext) -> str:
        name = f"{self.name}?" if self.is_optional else self.name
        signature = render_method_signature(name, self.params, self.type_text, context)
        return f"{_static_prefix(self.is_static)}{signature};"


@dataclass(frozen=True, slots=True)
class InterfaceProperty(Node):
    """Interface property.

    Renders: static <name>?: <type>;

    """

    name: str
    type_text: str
    is_static: bool = False
    is_optional: bool = False

    def body(self, context: RenderContext) -> str:
        name = f"{self.name}?" if self.is_optional else self.name
        return f"{_static_prefix(self.is_static)}{name}: {self.type_text};"


@dataclass(frozen=True, slots=True)
class InterfaceIndexer(Node):
    """Index signature.

    Renders: [<key_name>: <key_type>]: <return_type>;

    """

    key_name: str
    key_type: str
    return_type: str

    def body(self, context: RenderContext) -> str:
        return f"[{self.key_name}: {self.key_type}]: {self.return_type};"


# =============================================================================
# Class members
# =============================================================================


@dataclass(frozen=True, slots=True)
class ClassMethod(Node):
    """Class method signature.

    Renders: static <name>(<params>): <type>;

    """

    name: str
    params: tuple[Parameter, ...]
    type_text: str | None
    is_static: bool = False

    def body(self, context: RenderContext) -> str:
        signature = render_method_signature(self.name, self.params, self.type_text, context)
        return f"{_static_prefix(self.is_static)}{signature};"


@dataclass(frozen=True, slots=True)
class ClassConstructor(Node):
    """Constructor signature. Never static, never annotated.

    Renders: constructor(<params>);

    """

    params: tuple[Parameter, ...]

    def body(self, context: RenderContext) -> str:
        return render_method_signature("constructor", self.params, None, context) + ";"


@dataclass(frozen=True, slots=True)
class ClassProperty(Node):
    """Class property.

    Renders: static <name>: <type>;

    """

    name: str
    type_text: str
    is_static: bool = False

    def body(self, context: RenderContext) -> str:
        return f"{_static_prefix(self.is_static)}{self.name}: {self.type_text};"


# =============================================================================
# Parts
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariableDeclarator(Node):
    """Renders: <name>: <type>"""

    name: str
    type_text: str

    def body(self, context: RenderContext) -> str:
        return f"{self.name}: {self.type_text}"


@dataclass(frozen=True, slots=True)
class ExportSpecifier(Node):
    """One entry of an export list.

    Renders: <exported> or <exported> as <local>

    """

    exported: str
    local: str | None = None

    def body(self, context: RenderContext) -> str:
        if not self.local or self.local == self.exported:
            return self.exported
        return f"{self.exported} as {self.local}"


@dataclass(frozen=True, slots=True)
class Parameter(Node):
    """Function or method parameter.

    Renders: <name>: <type> or ...<name>: <type>

    Parameters render inline inside a signature and never emit comments.

    """

    name: str
    type_text: str
    is_rest: bool = False

    def as_rest_param(self) -> Parameter:
        """Return this parameter as a rest parameter (self if it already is)."""
        if self.is_rest:
            return self
        return dataclasses.replace(self, is_rest=True)

    def includes_comments(self) -> bool:
        return False

    def body(self, context: RenderContext) -> str:
        rest = "..." if self.is_rest else ""
        return f"{rest}{self.name}: {self.type_text}"


# PEP 695 type aliases for the closed catalogue
type Statement = (
    ModuleDeclaration
    | ExportAllFrom
    | ExportNamedDeclaration
    | Export
    | VariableDeclaration
    | FunctionDeclaration
    | InterfaceDeclaration
    | ClassDeclaration
)

type InterfaceMember = InterfaceMethod | InterfaceProperty | InterfaceIndexer

type ClassMember = ClassConstructor | ClassMethod | ClassProperty
