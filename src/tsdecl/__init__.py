"""
tsdecl — Ambient type-declaration builder for Python code generators

Assemble a tree of typed declaration nodes and render it to indented,
syntactically correct ``.d.ts`` text. Zero runtime dependencies.

Quick Start:
    >>> from tsdecl import (
    ...     create_export_declaration,
    ...     create_interface,
    ...     create_interface_property,
    ...     create_module_declaration,
    ... )
    >>> module = create_module_declaration("'geometry'", [
    ...     create_interface("Point", [
    ...         create_interface_property("x", "number"),
    ...         create_interface_property("y", "number"),
    ...     ]),
    ... ])
    >>> print(module.render())
    declare module 'geometry' {
      export interface Point {
        x: number;
        y: number;
      }
    }

Comments from an original source node:
    >>> prop = create_interface_property("x", "number").from_source(
    ...     {"leadingComments": [{"type": "CommentLine", "value": "horizontal"}]}
    ... )

Options:
    >>> module.render_default(indent_unit="\\t", suppress_comments=True)
"""

from tsdecl.builders import (
    create_class,
    create_class_constructor,
    create_class_method,
    create_class_property,
    create_export,
    create_export_all_from,
    create_export_declaration,
    create_export_specifier,
    create_function,
    create_interface,
    create_interface_indexer,
    create_interface_method,
    create_interface_property,
    create_module_declaration,
    create_param,
    create_variable_declaration,
    create_variable_declarator,
)
from tsdecl.comments import Comment, CommentKind
from tsdecl.config import (
    default_context,
    get_default_context,
    reset_default_context,
    set_default_context,
)
from tsdecl.context import RenderContext
from tsdecl.errors import AbstractNodeError, SerializationError, TsDeclError
from tsdecl.indent import indent_lines, indenter
from tsdecl.nodes import (
    ClassConstructor,
    ClassDeclaration,
    ClassMember,
    ClassMethod,
    ClassProperty,
    Export,
    ExportAllFrom,
    ExportNamedDeclaration,
    ExportSpecifier,
    FunctionDeclaration,
    InterfaceDeclaration,
    InterfaceIndexer,
    InterfaceMember,
    InterfaceMethod,
    InterfaceProperty,
    ModuleDeclaration,
    Node,
    Parameter,
    Statement,
    VariableDeclaration,
    VariableDeclarator,
    render_method_signature,
)
from tsdecl.render import render_declarations
from tsdecl.serialization import from_dict, from_json, to_dict, to_json
from tsdecl.visitor import BaseVisitor, iter_children, transform

__version__ = "0.1.0"

__all__ = [
    # Builders
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
    # Rendering
    "RenderContext",
    "default_context",
    "get_default_context",
    "indent_lines",
    "indenter",
    "render_declarations",
    "render_method_signature",
    "reset_default_context",
    "set_default_context",
    # Comments
    "Comment",
    "CommentKind",
    # Nodes
    "ClassConstructor",
    "ClassDeclaration",
    "ClassMember",
    "ClassMethod",
    "ClassProperty",
    "Export",
    "ExportAllFrom",
    "ExportNamedDeclaration",
    "ExportSpecifier",
    "FunctionDeclaration",
    "InterfaceDeclaration",
    "InterfaceIndexer",
    "InterfaceMember",
    "InterfaceMethod",
    "InterfaceProperty",
    "ModuleDeclaration",
    "Node",
    "Parameter",
    "Statement",
    "VariableDeclaration",
    "VariableDeclarator",
    # Errors
    "AbstractNodeError",
    "SerializationError",
    "TsDeclError",
    # Tree utilities
    "BaseVisitor",
    "from_dict",
    "from_json",
    "iter_children",
    "to_dict",
    "to_json",
    "transform",
    "__version__",
]
