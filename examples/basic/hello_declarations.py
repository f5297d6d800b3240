"""Build a small ambient module and print its declaration text."""

from tsdecl import (
    create_export_declaration,
    create_function,
    create_interface,
    create_interface_method,
    create_interface_property,
    create_module_declaration,
    create_param,
    render_declarations,
)

greeter = create_interface("Greeter", [
    create_interface_property("name", "string"),
    create_interface_method("greet", [create_param("others", "string[]", True)], "string"),
    create_interface_property("loud", "boolean", is_optional=True),
]).from_source({"leadingComments": [{"type": "CommentBlock", "value": "* A greeter. "}]})

module = create_module_declaration("'hello'", [
    greeter,
    create_export_declaration(create_function("makeGreeter", [create_param("name", "string")], "Greeter")),
])

print(render_declarations([module]), end="")
