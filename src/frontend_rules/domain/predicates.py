"""Shape predicates shared by the React and JSX rules."""

import re
from collections.abc import Iterable
from enum import Enum

from frontend_rules.domain.nodes import Node

_COMPONENT_NAME = re.compile(r"^[A-Z]")
_HOOK_NAME = re.compile(r"^use[A-Z0-9]")

FUNCTION_TYPES: frozenset[str] = frozenset(
    {"FunctionDeclaration", "FunctionExpression", "ArrowFunctionExpression"}
)
FUNCTION_VALUE_TYPES: frozenset[str] = frozenset({"FunctionExpression", "ArrowFunctionExpression"})
JSX_ROOT_TYPES: frozenset[str] = frozenset({"JSXElement", "JSXFragment"})


class NameShape(Enum):
    """What a declaration name says about the function it names."""

    COMPONENT = "component"
    HOOK = "hook"
    ROOT_FUNCTION = "root-function"


def is_component_name(name: str | None) -> bool:
    """PascalCase-ish: the first character is an uppercase ASCII letter."""
    return bool(name) and _COMPONENT_NAME.match(name) is not None  # type: ignore[arg-type]


def is_hook_name(name: str | None) -> bool:
    """`use` followed by an uppercase letter or digit (useState, use3D)."""
    return bool(name) and _HOOK_NAME.match(name) is not None  # type: ignore[arg-type]


def is_root_function_name(name: str | None) -> bool:
    """Anything that is neither a component nor a hook name, including no name."""
    return not is_component_name(name) and not is_hook_name(name)


def classify_name(name: str | None) -> NameShape:
    if is_component_name(name):
        return NameShape.COMPONENT
    if is_hook_name(name):
        return NameShape.HOOK
    return NameShape.ROOT_FUNCTION


def identifier_name(node: Node | None) -> str | None:
    """Name of an Identifier/JSXIdentifier; None for patterns and other shapes."""
    if node is None:
        return None
    return node.name_text


def is_function_value(node: Node | None) -> bool:
    """True for function and arrow function expressions (a declarator's init)."""
    return node is not None and node.type in FUNCTION_VALUE_TYPES


def returns_jsx(function: Node) -> bool:
    """True if a block-bodied function has a top-level `return <jsx/>`."""
    body = function.body
    if body is None or body.type != "BlockStatement":
        return False
    for statement in body.body or []:
        if statement.type != "ReturnStatement":
            continue
        argument = statement.argument
        if argument is not None and argument.type in JSX_ROOT_TYPES:
            return True
    return False


def is_component(node: Node) -> bool:
    """
    Heuristic React component detection.

    Functions count when their own name or the declarator they initialize is
    component-shaped, or when their block body returns JSX. Classes count when
    their name is component-shaped.
    """
    if node.type in FUNCTION_TYPES:
        if is_component_name(identifier_name(node.id)):
            return True
        parent = node.parent
        if (
            parent is not None
            and parent.type == "VariableDeclarator"
            and is_component_name(identifier_name(parent.id))
        ):
            return True
        return returns_jsx(node)
    if node.type == "ClassDeclaration":
        return is_component_name(identifier_name(node.id))
    return False


def is_component_declarator(node: Node) -> bool:
    """`const Foo = () => ...` / `const Foo = function () {...}`."""
    return is_function_value(node.init) and is_component_name(identifier_name(node.id))


def _is_blank_string_literal(node: Node | None) -> bool:
    return (
        node is not None
        and node.type == "Literal"
        and isinstance(node.value, str)
        and node.value.strip() == ""
    )


def get_meaningful_children(children: Iterable[Node]) -> list[Node]:
    """
    Drop JSX children that render nothing.

    Whitespace-only text, empty expression containers (`{}` and
    `{/* comment */}`) and containers holding a blank string literal are
    discarded; every other child is meaningful.
    """
    meaningful: list[Node] = []
    for child in children:
        if child.type == "JSXText":
            if str(child.value or "").strip():
                meaningful.append(child)
            continue
        if child.type == "JSXExpressionContainer":
            expression = child.expression
            if expression is None or expression.type == "JSXEmptyExpression":
                continue
            if _is_blank_string_literal(expression):
                continue
        meaningful.append(child)
    return meaningful


def is_fragment_element(node: Node) -> bool:
    """`<Fragment>` or `<React.Fragment>` written as an element."""
    opening = node.openingElement
    if opening is None or opening.name is None:
        return False
    name = opening.name
    if name.type == "JSXIdentifier":
        return name.name_text == "Fragment"
    if name.type == "JSXMemberExpression":
        return (
            identifier_name(name.object) == "React"
            and identifier_name(name.property) == "Fragment"
        )
    return False


def jsx_element_tag(opening: Node) -> str | None:
    """Tag of a JSXOpeningElement when it is a plain identifier (`div`, `Button`)."""
    name = opening.name
    if name is None or name.type != "JSXIdentifier":
        return None
    return name.name_text


def jsx_attribute_name(attribute: Node) -> str | None:
    if attribute.type != "JSXAttribute" or attribute.name is None:
        return None
    return attribute.name.name_text


def find_jsx_attribute(opening: Node, name: str) -> Node | None:
    for attribute in opening.attributes or []:
        if jsx_attribute_name(attribute) == name:
            return attribute
    return None


def string_literal_value(node: Node | None) -> str | None:
    """The value of a string Literal, else None."""
    if node is None or node.type != "Literal":
        return None
    return node.value if isinstance(node.value, str) else None


def template_text(node: Node, key: str = "cooked") -> str:
    """Concatenate the static parts of a TemplateLiteral."""
    parts: list[str] = []
    for quasi in node.quasis or []:
        value = quasi.value
        if isinstance(value, dict) and isinstance(value.get(key), str):
            parts.append(value[key])
    return "".join(parts)
