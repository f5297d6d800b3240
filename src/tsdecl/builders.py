"""Construction API for declaration trees.

One factory per node type. Sequences are accepted as any iterable and
stored as tuples.

Example:
    >>> from tsdecl.builders import create_class, create_export_declaration
    >>> print(create_export_declaration(create_class("Foo", None, [])).render())
    export class Foo {
    }

"""

from collections.abc import Iterable

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


def create_module_declaration(name: str, children: Iterable[Node]) -> ModuleDeclaration:
    return ModuleDeclaration(name, tuple(children))


def create_export_all_from(source: str) -> ExportAllFrom:
    return ExportAllFrom(source)


def create_export_declaration(decl: Node) -> ExportNamedDeclaration:
    return ExportNamedDeclaration(decl)


def create_variable_declaration(kind: str, declarators: Iterable[Node]) -> VariableDeclaration:
    """``kind`` is the keyword to emit: ``const``, ``let`` or ``var``."""
    return VariableDeclaration(kind, tuple(declarators))


def create_variable_declarator(name: str, type_text: str) -> VariableDeclarator:
    return VariableDeclarator(name, type_text)


def create_export_specifier(exported: str, local: str | None = None) -> ExportSpecifier:
    return ExportSpecifier(exported, local)


def create_export(specifiers: Iterable[ExportSpecifier], source: str | None = None) -> Export:
    return Export(tuple(specifiers), source)


def create_param(name: str, type_text: str, is_rest: bool = False) -> Parameter:
    return Parameter(name, type_text, is_rest)


def create_function(
    name: str, params: Iterable[Parameter], type_text: str | None
) -> FunctionDeclaration:
    return FunctionDeclaration(name, tuple(params), type_text)


def create_interface(
    name: str,
    members: Iterable[Node],
    base_interfaces: Iterable[str | Node] = (),
) -> InterfaceDeclaration:
    return InterfaceDeclaration(name, tuple(members), tuple(base_interfaces))


def create_interface_method(
    name: str,
    params: Iterable[Parameter],
    type_text: str | None,
    is_static: bool = False,
    is_optional: bool = False,
) -> InterfaceMethod:
    return InterfaceMethod(name, tuple(params), type_text, is_static, is_optional)


def create_interface_property(
    name: str,
    type_text: str,
    is_static: bool = False,
    is_optional: bool = False,
) -> InterfaceProperty:
    return InterfaceProperty(name, type_text, is_static, is_optional)


def create_interface_indexer(key_name: str, key_type: str, return_type: str) -> InterfaceIndexer:
    return InterfaceIndexer(key_name, key_type, return_type)


def create_class(
    name: str, super_name: str | None, members: Iterable[Node]
) -> ClassDeclaration:
    return ClassDeclaration(name, super_name, tuple(members))


def create_class_constructor(params: Iterable[Parameter]) -> ClassConstructor:
    return ClassConstructor(tuple(params))


def create_class_method(
    name: str,
    params: Iterable[Parameter],
    type_text: str | None,
    is_static: bool = False,
) -> ClassMethod:
    return ClassMethod(name, tuple(params), type_text, is_static)


def create_class_property(name: str, type_text: str, is_static: bool = False) -> ClassProperty:
    return ClassProperty(name, type_text, is_static)


__all__ = [
    "create_class",
    "create_class_constructor",
    "create_class_method",
    "create_class_property",
    "create_export",
    "create_export_all_from",
    "create_export_declaration",
    "create_export_specifier",
    "create_function",
    "create_interface",
    "create_interface_indexer",
    "create_interface_method",
    "create_interface_property",
    "create_module_declaration",
    "create_param",
    "create_variable_declaration",
    "create_variable_declarator",
]
