"""Tests for the rendering rules of every node type."""

import dataclasses

import pytest

from tsdecl import (
    AbstractNodeError,
    ClassDeclaration,
    Node,
    RenderContext,
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
    render_method_signature,
)

CTX = RenderContext()


class TestBaseNode:
    def test_body_is_abstract(self) -> None:
        with pytest.raises(AbstractNodeError) as exc_info:
            Node().render()
        assert exc_info.value.node_type == "Node"

    def test_abstract_error_is_not_implemented_error(self) -> None:
        with pytest.raises(NotImplementedError):
            Node().body(CTX)

    def test_nodes_are_frozen(self) -> None:
        node = create_param("a", "string")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "b"  # type: ignore[misc]

    def test_rendering_is_repeatable(self) -> None:
        node = create_interface("A", [create_interface_property("x", "number")])
        assert node.render() == node.render() == node.render(CTX)

    def test_only_class_has_no_trailing_semicolon(self) -> None:
        assert ClassDeclaration.no_trailing_semicolon is True
        assert create_function("f", [], "void").no_trailing_semicolon is False
        assert create_interface("I", []).no_trailing_semicolon is False


class TestModuleDeclaration:
    def test_children_one_per_line(self) -> None:
        module = create_module_declaration("'m'", [
            create_export_all_from("./a"),
            create_export_all_from("./b"),
        ])
        assert module.render() == (
            "declare module 'm' {\n"
            "  export * from './a';\n"
            "  export * from './b';\n"
            "}"
        )

    def test_empty_module(self) -> None:
        assert create_module_declaration("m", []).render() == "declare module m {\n}"

    def test_absent_children_skipped(self) -> None:
        module = create_module_declaration("m", [
            create_variable_declaration("const", []),
            create_export_all_from("./a"),
            create_export_declaration(create_variable_declaration("let", [])),
        ])
        assert module.render() == "declare module m {\n  export * from './a';\n}"


class TestExports:
    def test_export_all_from(self) -> None:
        assert create_export_all_from("./x").render() == "export * from './x';"

    def test_export_class_has_no_semicolon(self) -> None:
        node = create_export_declaration(create_class("Foo", None, []))
        assert node.render() == "export class Foo {\n}"

    def test_export_function_has_semicolon(self) -> None:
        node = create_export_declaration(create_function("foo", [], "void"))
        assert node.render() == "export function foo(): void;"

    def test_export_variable(self) -> None:
        node = create_export_declaration(
            create_variable_declaration("const", [create_variable_declarator("a", "number")])
        )
        assert node.render() == "export const a: number;"

    def test_export_absent_declaration_is_absent(self) -> None:
        node = create_export_declaration(create_variable_declaration("const", []))
        assert node.render() is None

    def test_specifier_without_alias(self) -> None:
        assert create_export_specifier("a").render() == "a"

    def test_specifier_alias_equal_to_name(self) -> None:
        assert create_export_specifier("a", "a").render() == "a"

    def test_specifier_with_alias(self) -> None:
        assert create_export_specifier("a", "b").render() == "a as b"

    def test_export_list(self) -> None:
        node = create_export([create_export_specifier("a"), create_export_specifier("b", "c")])
        assert node.render() == "export {\n  a,\n  b as c\n};"

    def test_export_list_from_source(self) -> None:
        node = create_export([create_export_specifier("a")], "./mod")
        assert node.render() == "export {\n  a\n} from './mod';"


class TestVariableDeclaration:
    def test_empty_declaration_is_absent(self) -> None:
        assert create_variable_declaration("const", []).render() is None

    def test_single_declarator(self) -> None:
        node = create_variable_declaration("var", [create_variable_declarator("x", "number")])
        assert node.render() == "var x: number"

    def test_multiple_declarators_aligned(self) -> None:
        node = create_variable_declaration("let", [
            create_variable_declarator("x", "number"),
            create_variable_declarator("y", "string"),
            create_variable_declarator("z", "boolean"),
        ])
        assert node.render() == "let x: number,\n  y: string,\n  z: boolean"

    def test_custom_continuation_indent(self) -> None:
        node = create_variable_declaration("let", [
            create_variable_declarator("x", "number"),
            create_variable_declarator("y", "string"),
        ])
        assert node.render_default(continuation_indent_unit="    ") == "let x: number,\n    y: string"

    def test_absent_declarators_dropped(self) -> None:
        node = create_variable_declaration("let", [
            create_variable_declaration("const", []),
            create_variable_declarator("y", "string"),
        ])
        assert node.render() == "let y: string"

    def test_declarators_render_at_depth_zero(self) -> None:
        node = create_variable_declaration("let", [
            create_variable_declarator("x", "number"),
            create_variable_declarator("y", "string"),
        ])
        assert node.render(RenderContext(depth=1)) == "  let x: number,\n    y: string"


class TestParameters:
    def test_plain(self) -> None:
        assert create_param("n", "T").render() == "n: T"

    def test_rest(self) -> None:
        assert create_param("args", "any[]", True).render() == "...args: any[]"

    def test_as_rest_param_is_idempotent_and_non_mutating(self) -> None:
        param = create_param("n", "T")
        rest = param.as_rest_param()
        assert rest.as_rest_param() is rest
        assert rest.as_rest_param().render() == "...n: T"
        assert param.render() == "n: T"
        assert param.is_rest is False

    def test_as_rest_param_on_rest_returns_self(self) -> None:
        param = create_param("n", "T", is_rest=True)
        assert param.as_rest_param() is param


class TestSignatures:
    def test_helper_without_return_type(self) -> None:
        params = (create_param("a", "string"), create_param("b", "number"))
        assert render_method_signature("m", params, None, CTX) == "m(a: string, b: number)"

    def test_function(self) -> None:
        node = create_function("f", [
            create_param("a", "string"),
            create_param("rest", "number[]").as_rest_param(),
        ], "void")
        assert node.render() == "function f(a: string, ...rest: number[]): void"

    def test_function_without_type(self) -> None:
        assert create_function("f", [], None).render() == "function f()"


class TestInterface:
    def test_members_and_bases(self) -> None:
        node = create_interface("A", [
            create_interface_property("x", "number"),
            create_interface_indexer("key", "string", "any"),
        ], ["B", "C"])
        assert node.render() == (
            "export interface A extends B, C {\n"
            "  x: number;\n"
            "  [key: string]: any;\n"
            "}"
        )

    def test_node_base_interfaces(self) -> None:
        node = create_interface("A", [], [create_export_specifier("B")])
        assert node.render() == "export interface A extends B {\n}"

    def test_absent_and_empty_bases_skipped(self) -> None:
        node = create_interface("A", [], [
            "B",
            create_variable_declaration("const", []),
            "",
            create_export_specifier("C"),
        ])
        assert node.render() == "export interface A extends B, C {\n}"

    def test_only_absent_bases_drops_extends(self) -> None:
        node = create_interface("A", [], [create_variable_declaration("const", [])])
        assert node.render() == "export interface A {\n}"

    def test_no_bases(self) -> None:
        assert create_interface("A", []).render() == "export interface A {\n}"

    def test_optional_method(self) -> None:
        node = create_interface_method("m", [], "void", False, True)
        assert node.render() == "m?(): void;"

    def test_static_method(self) -> None:
        node = create_interface_method("m", [create_param("a", "T")], "T", True, False)
        assert node.render() == "static m(a: T): T;"

    def test_static_optional_method(self) -> None:
        node = create_interface_method("m", [], "void", is_static=True, is_optional=True)
        assert node.render() == "static m?(): void;"

    def test_property_modifiers(self) -> None:
        assert create_interface_property("p", "T").render() == "p: T;"
        assert create_interface_property("p", "T", is_optional=True).render() == "p?: T;"
        assert create_interface_property("p", "T", True, True).render() == "static p?: T;"

    def test_indexer(self) -> None:
        assert create_interface_indexer("i", "number", "T").render() == "[i: number]: T;"


class TestClass:
    def test_class_with_members(self) -> None:
        node = create_class("Circle", "Shape", [
            create_class_constructor([create_param("r", "number")]),
            create_class_property("count", "number", True),
            create_class_method("area", [], "number"),
            create_class_method("create", [create_param("r", "number")], "Circle", True),
        ])
        assert node.render() == (
            "class Circle extends Shape {\n"
            "  constructor(r: number);\n"
            "  static count: number;\n"
            "  area(): number;\n"
            "  static create(r: number): Circle;\n"
            "}"
        )

    def test_constructor_without_params(self) -> None:
        assert create_class_constructor([]).render() == "constructor();"

    def test_method_without_type(self) -> None:
        assert create_class_method("m", [], None).render() == "m();"

    def test_property(self) -> None:
        assert create_class_property("p", "T").render() == "p: T;"
