"""Tree visitor and transformer for declaration nodes.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees before rendering.

Example — collect exported names:

    class InterfaceNames(BaseVisitor[None]):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_interface(self, node: InterfaceDeclaration) -> None:
            self.names.append(node.name)

    collector = InterfaceNames()
    collector.visit(module)

Example — make every interface property optional:

    def optionalize(node: Node) -> Node:
        if isinstance(node, InterfaceProperty):
            return dataclasses.replace(node, is_optional=True)
        return node

    new_module = transform(module, optionalize)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    transform function is pure.

"""

import dataclasses
from collections.abc import Callable

from tsdecl.nodes import (
    ClassConstructor,
    ClassDeclaration,
    ClassMethod,
    ClassProperty,
    Export,
    ExportAllFrom,
    ExportNamedDeclaration,
    ExportSpecifier,
    FunctionDeclaration,
    InterfaceDeclaration,
    InterfaceIndexer,
    InterfaceMethod,
    InterfaceProperty,
    ModuleDeclaration,
    Node,
    Parameter,
    VariableDeclaration,
    VariableDeclarator,
)


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    # -- Statements ------------------------------------------------------------

    def visit_module(self, node: ModuleDeclaration) -> T:
        return self.visit_default(node)

    def visit_export_all_from(self, node: ExportAllFrom) -> T:
        return self.visit_default(node)

    def visit_export_declaration(self, node: ExportNamedDeclaration) -> T:
        return self.visit_default(node)

    def visit_export(self, node: Export) -> T:
        return self.visit_default(node)

    def visit_variable_declaration(self, node: VariableDeclaration) -> T:
        return self.visit_default(node)

    def visit_function(self, node: FunctionDeclaration) -> T:
        return self.visit_default(node)

    def visit_interface(self, node: InterfaceDeclaration) -> T:
        return self.visit_default(node)

    def visit_class(self, node: ClassDeclaration) -> T:
        return self.visit_default(node)

    # -- Members ---------------------------------------------------------------

    def visit_interface_method(self, node: InterfaceMethod) -> T:
        return self.visit_default(node)

    def visit_interface_property(self, node: InterfaceProperty) -> T:
        return self.visit_default(node)

    def visit_interface_indexer(self, node: InterfaceIndexer) -> T:
        return self.visit_default(node)

    def visit_class_constructor(self, node: ClassConstructor) -> T:
        return self.visit_default(node)

    def visit_class_method(self, node: ClassMethod) -> T:
        return self.visit_default(node)

    def visit_class_property(self, node: ClassProperty) -> T:
        return self.visit_default(node)

    # -- Parts -----------------------------------------------------------------

    def visit_variable_declarator(self, node: VariableDeclarator) -> T:
        return self.visit_default(node)

    def visit_export_specifier(self, node: ExportSpecifier) -> T:
        return self.visit_default(node)

    def visit_parameter(self, node: Parameter) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case ModuleDeclaration():
                return self.visit_module(node)
            case ExportAllFrom():
                return self.visit_export_all_from(node)
            case ExportNamedDeclaration():
                return self.visit_export_declaration(node)
            case Export():
                return self.visit_export(node)
            case VariableDeclaration():
                return self.visit_variable_declaration(node)
            case FunctionDeclaration():
                return self.visit_function(node)
            case InterfaceDeclaration():
                return self.visit_interface(node)
            case ClassDeclaration():
                return self.visit_class(node)
            case InterfaceMethod():
                return self.visit_interface_method(node)
            case InterfaceProperty():
                return self.visit_interface_property(node)
            case InterfaceIndexer():
                return self.visit_interface_indexer(node)
            case ClassConstructor():
                return self.visit_class_constructor(node)
            case ClassMethod():
                return self.visit_class_method(node)
            case ClassProperty():
                return self.visit_class_property(node)
            case VariableDeclarator():
                return self.visit_variable_declarator(node)
            case ExportSpecifier():
                return self.visit_export_specifier(node)
            case Parameter():
                return self.visit_parameter(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        for child in iter_children(node):
            self.visit(child)


def iter_children(node: Node) -> tuple[Node, ...]:
    """Direct child nodes of ``node``, in render order."""
    match node:
        case ModuleDeclaration(children=children):
            return children
        case ExportNamedDeclaration(declaration=declaration):
            return (declaration,)
        case Export(specifiers=specifiers):
            return specifiers
        case VariableDeclaration(declarators=declarators):
            return declarators
        case InterfaceDeclaration(members=members, base_interfaces=bases):
            return tuple(b for b in bases if isinstance(b, Node)) + members
        case ClassDeclaration(members=members):
            return members
        case (
            FunctionDeclaration(params=params)
            | InterfaceMethod(params=params)
            | ClassMethod(params=params)
            | ClassConstructor(params=params)
        ):
            return params
        case _:
            return ()  # Leaf nodes


def transform(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Apply a function to every node in the tree, returning a new tree.

    ``fn`` is called bottom-up: children are transformed first, then the
    parent with its new children. Return None from ``fn`` to remove a node.
    An export wrapper whose declaration is removed is removed with it.
    The root cannot be removed; returning None for it raises TypeError.

    Since all nodes are frozen dataclasses, the original tree is untouched.

    """
    result = _transform_node(node, fn)
    if result is None:
        msg = "transform fn must return a node for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    transformed = _transform_children(node, fn)
    if transformed is None:
        return None
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Produce a new node with children transformed; filter out removed nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    def _replaced(field_name: str, children: tuple[Node, ...]) -> Node:
        new_children = _filtered(children)
        if new_children != children:
            return dataclasses.replace(node, **{field_name: new_children})
        return node

    match node:
        case ModuleDeclaration(children=children):
            return _replaced("children", children)
        case ExportNamedDeclaration(declaration=declaration):
            new_declaration = _transform_node(declaration, fn)
            if new_declaration is None:
                return None
            if new_declaration is not declaration:
                return dataclasses.replace(node, declaration=new_declaration)
        case Export(specifiers=specifiers):
            return _replaced("specifiers", specifiers)
        case VariableDeclaration(declarators=declarators):
            return _replaced("declarators", declarators)
        case InterfaceDeclaration(members=members, base_interfaces=bases):
            # String bases are kept as-is; node bases go through fn
            new_bases = tuple(
                result for b in bases
                if (result := b if isinstance(b, str) else _transform_node(b, fn)) is not None
            )
            new_members = _filtered(members)
            if new_bases != bases or new_members != members:
                return dataclasses.replace(node, base_interfaces=new_bases, members=new_members)
        case ClassDeclaration(members=members):
            return _replaced("members", members)
        case (
            FunctionDeclaration(params=params)
            | InterfaceMethod(params=params)
            | ClassMethod(params=params)
            | ClassConstructor(params=params)
        ):
            return _replaced("params", params)
        case _:
            pass  # Leaf nodes: return as-is

    return node
