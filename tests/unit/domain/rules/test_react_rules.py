"""Tests for no-nested-component and no-unnecessary-fragment."""

import unittest

from tests.unit.estree_builders import (
    arrow,
    block,
    class_decl,
    const,
    expression_stmt,
    fragment,
    function_decl,
    function_expr,
    ident,
    jsx,
    jsx_container,
    jsx_text,
    literal,
    program,
    return_stmt,
    run_rule,
)


class TestNoNestedComponent(unittest.TestCase):
    RULE = "no-nested-component"

    def test_function_inside_component_reported_once(self) -> None:
        tree = program(
            function_decl(
                "App",
                function_decl("Inner", return_stmt(jsx("div"))),
                return_stmt(jsx("Inner")),
            )
        )
        violations = run_rule(self.RULE, tree)
        self.assertEqual(len(violations), 1)
        self.assertEqual(
            violations[0].message,
            "Do not define a new component inside another component. Move 'Inner' to the top level of the file.",
        )

    def test_arrow_component_inside_arrow_component(self) -> None:
        tree = program(const("Page", arrow(block(const("Row", arrow(jsx("tr"))), return_stmt(jsx("table"))))))
        violations = run_rule(self.RULE, tree)
        self.assertEqual([v.data["name"] for v in violations], ["Row"])

    def test_sibling_components_pass(self) -> None:
        tree = program(
            function_decl("Header", return_stmt(jsx("header"))),
            const("Footer", arrow(jsx("footer"))),
            class_decl("Sidebar"),
        )
        self.assertEqual(run_rule(self.RULE, tree), [])

    def test_helpers_inside_component_pass(self) -> None:
        tree = program(
            function_decl(
                "App",
                const("handleClick", arrow()),
                function_decl("format", return_stmt(literal("x"))),
                return_stmt(jsx("div")),
            )
        )
        self.assertEqual(run_rule(self.RULE, tree), [])

    def test_jsx_returning_helper_counts_as_component(self) -> None:
        tree = program(function_decl("App", function_decl("renderRow", return_stmt(jsx("tr")))))
        self.assertEqual([v.data["name"] for v in run_rule(self.RULE, tree)], ["renderRow"])

    def test_class_inside_component(self) -> None:
        tree = program(function_decl("App", class_decl("Widget")))
        self.assertEqual(len(run_rule(self.RULE, tree)), 1)

    def test_component_inside_plain_function_passes(self) -> None:
        tree = program(function_decl("makeRoutes", const("Route", function_expr(return_stmt(jsx("div"))))))
        self.assertEqual(run_rule(self.RULE, tree), [])

    def test_stack_pops_after_component(self) -> None:
        tree = program(
            function_decl("First", return_stmt(jsx("div"))),
            function_decl("Second", return_stmt(jsx("div"))),
        )
        self.assertEqual(run_rule(self.RULE, tree), [])

    def test_each_nesting_level_reported(self) -> None:
        tree = program(
            function_decl("A", function_decl("B", function_decl("C", return_stmt(jsx("i"))))),
        )
        self.assertEqual([v.data["name"] for v in run_rule(self.RULE, tree)], ["B", "C"])


class TestNoUnnecessaryFragment(unittest.TestCase):
    RULE = "no-unnecessary-fragment"

    def _render(self, element: dict) -> dict:
        return program(expression_stmt(element))

    def test_fragment_with_single_child_reported(self) -> None:
        violations = run_rule(self.RULE, self._render(fragment(jsx_text("\n  "), jsx("div"), jsx_text("\n"))))
        self.assertEqual([v.message_id for v in violations], ["unnecessaryFragment"])

    def test_fragment_with_several_children_passes(self) -> None:
        self.assertEqual(run_rule(self.RULE, self._render(fragment(jsx("dt"), jsx("dd")))), [])

    def test_comment_container_does_not_count_as_child(self) -> None:
        violations = run_rule(self.RULE, self._render(fragment(jsx_container(), jsx("div"))))
        self.assertEqual(len(violations), 1)

    def test_fragment_around_fragment_passes(self) -> None:
        self.assertEqual(run_rule(self.RULE, self._render(fragment(fragment(jsx("a"), jsx("b"))))), [])

    def test_empty_fragment_passes(self) -> None:
        self.assertEqual(run_rule(self.RULE, self._render(fragment())), [])

    def test_react_fragment_element(self) -> None:
        violations = run_rule(self.RULE, self._render(jsx("React.Fragment", jsx_text("text"))))
        self.assertEqual(len(violations), 1)

    def test_fragment_element_with_expression_child(self) -> None:
        violations = run_rule(self.RULE, self._render(jsx("Fragment", jsx_container(ident("label")))))
        self.assertEqual(len(violations), 1)

    def test_regular_element_with_single_child_passes(self) -> None:
        self.assertEqual(run_rule(self.RULE, self._render(jsx("div", jsx("span")))), [])
