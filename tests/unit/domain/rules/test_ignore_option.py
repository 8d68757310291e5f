"""Every rule stays silent on a file matched by its `ignore` globs."""

import pytest

from frontend_rules.domain.registry import ALL_RULES
from tests.unit.estree_builders import (
    arrow,
    const,
    export_default,
    expression_stmt,
    fragment,
    function_decl,
    ident,
    import_decl,
    jsx,
    jsx_attr,
    jsx_container,
    literal,
    place,
    program,
    return_stmt,
    run_rule,
    template,
    ts_interface,
    ts_property,
)

FILENAME = "src/legacy/MyWidget.tsx"
CURLY_TEXT = "<Input name={'email'} />"


def _render(element: dict) -> dict:
    return program(expression_stmt(element))


def _class_name(value: dict) -> dict:
    return _render(jsx("div", attributes=[jsx_attr("className", value)]))


def _curly() -> dict:
    container = place(jsx_container(literal("email", raw="'email'")), CURLY_TEXT, "{'email'}")
    return _render(jsx("Input", attributes=[jsx_attr("name", container)]))


# One offending tree per rule; each is reported on FILENAME when nothing is ignored.
OFFENDERS: dict[str, dict] = {
    "enforce-typography-components": _render(jsx("p")),
    "no-direct-colors": _class_name(literal("text-[#fff]")),
    "top-level-const-snake": program(const("myValue", literal(42))),
    "no-focusable-non-interactive-elements": _render(
        jsx("div", attributes=[jsx_attr("onClick", jsx_container(ident("handle")))])
    ),
    "enforce-kebab-case-filenames": program(),
    "enforce-interface-type-naming": program(ts_interface("User")),
    "no-default-export": program(export_default(ident("App"))),
    "no-inline-arrow-functions-in-jsx": _render(
        jsx("button", attributes=[jsx_attr("onClick", jsx_container(arrow(ident("go"))))])
    ),
    "interface-type-required-first": program(
        ts_interface("IUser", ts_property("nickname", optional=True), ts_property("id"))
    ),
    "enforce-alias-import-paths": program(import_decl("./button")),
    "no-nested-component": program(
        function_decl("App", function_decl("Inner", return_stmt(jsx("div"))), return_stmt(jsx("Inner")))
    ),
    "require-jsdoc-on-component": program(function_decl("Button")),
    "require-jsdoc-on-hook": program(function_decl("useCounter")),
    "require-jsdoc-on-root-function": program(function_decl("formatDate")),
    "enforce-classname-utility": _class_name(jsx_container(template("p-4 flex"))),
    "enforce-no-empty-classname-utility": _class_name(literal("")),
    "no-empty-tailwind-class": _class_name(literal("")),
    "no-unnecessary-curly-in-props": _curly(),
    "no-unnecessary-fragment": _render(fragment(jsx("div"))),
}

SOURCE_TEXT = {"no-unnecessary-curly-in-props": CURLY_TEXT}


def test_every_registered_rule_has_an_offender() -> None:
    assert sorted(OFFENDERS) == sorted(rule.name for rule in ALL_RULES)


@pytest.mark.parametrize("rule_name", sorted(OFFENDERS))
def test_ignored_path_reports_nothing(rule_name: str) -> None:
    tree = OFFENDERS[rule_name]
    text = SOURCE_TEXT.get(rule_name, "")
    assert run_rule(rule_name, tree, filename=FILENAME, text=text) != []
    assert run_rule(rule_name, tree, filename=FILENAME, text=text, options={"ignore": ["src/legacy/**"]}) == []
