"""Unit tests for LintSourceUseCase (use_cases/lint_source.py)."""

import unittest
from unittest.mock import MagicMock

from frontend_rules.domain.config import LintConfiguration, RuleSetting
from frontend_rules.domain.rules import RuleMeta, Severity
from frontend_rules.use_cases.lint_source import LintSourceUseCase
from tests.unit.estree_builders import (
    concatenation,
    const,
    export_default,
    expression_stmt,
    function_decl,
    ident,
    jsx,
    lint,
    literal,
    parsed,
    place,
    program,
    return_stmt,
)

META = RuleMeta(type="problem", description="d", category="c", messages={"m": "m"})


def _recording_rule(name: str, calls: list[str], selectors: tuple[str, ...]) -> MagicMock:
    rule = MagicMock()
    rule.name = name
    rule.meta = META

    def create(context: object) -> dict:
        return {
            selector: (lambda node, s=selector: calls.append(f"{name}:{s}:{node.type}"))
            for selector in selectors
        }

    rule.create.side_effect = create
    return rule


def _configuration(*rules: MagicMock) -> MagicMock:
    configuration = MagicMock(spec=LintConfiguration)
    configuration.enabled_rules.return_value = [(rule, RuleSetting(severity=Severity.ERROR)) for rule in rules]
    return configuration


class TestTraversal(unittest.TestCase):
    def test_enter_and_exit_order(self) -> None:
        calls: list[str] = []
        rule = _recording_rule("r", calls, ("Program", "Program:exit", "Identifier", "Literal", "VariableDeclarator:exit"))
        tree = program(const("a", literal(1)), expression_stmt(ident("b")))
        LintSourceUseCase(_configuration(rule)).execute(parsed(tree))
        self.assertEqual(
            calls,
            [
                "r:Program:Program",
                "r:Identifier:Identifier",
                "r:Literal:Literal",
                "r:VariableDeclarator:exit:VariableDeclarator",
                "r:Identifier:Identifier",
                "r:Program:exit:Program",
            ],
        )

    def test_rules_fire_in_registration_order_per_node(self) -> None:
        calls: list[str] = []
        first = _recording_rule("first", calls, ("Identifier",))
        second = _recording_rule("second", calls, ("Identifier",))
        LintSourceUseCase(_configuration(first, second)).execute(parsed(program(expression_stmt(ident("x")))))
        self.assertEqual(calls, ["first:Identifier:Identifier", "second:Identifier:Identifier"])

    def test_rule_context_is_fresh_per_file(self) -> None:
        calls: list[str] = []
        rule = _recording_rule("r", calls, ("Program",))
        use_case = LintSourceUseCase(_configuration(rule))
        use_case.execute(parsed(program(), filename="a.tsx"))
        use_case.execute(parsed(program(), filename="b.tsx"))
        contexts = [call.args[0] for call in rule.create.call_args_list]
        self.assertEqual([c.filename for c in contexts], ["a.tsx", "b.tsx"])
        self.assertIsNot(contexts[0], contexts[1])


class TestLintResult(unittest.TestCase):
    def test_violations_sorted_by_location_with_severity(self) -> None:
        text = "const value = 1;\nexport default value;\n"
        declaration = const("value", literal(1))
        place(declaration["declarations"][0]["id"], text, "value")
        tree = program(declaration, place(export_default(ident("value")), text, "export default value;"))
        result = lint(
            tree,
            {
                "extends": [],
                "rules": {"no-default-export": "error", "top-level-const-snake": "warn"},
            },
            text=text,
        )
        self.assertEqual([v.rule_id for v in result.violations], ["top-level-const-snake", "no-default-export"])
        self.assertEqual([v.severity for v in result.violations], [Severity.WARN, Severity.ERROR])
        self.assertEqual((result.error_count, result.warning_count), (1, 1))
        self.assertTrue(result.has_errors())

    def test_recommended_run_over_a_component_file(self) -> None:
        tree = program(
            export_default(function_decl("App", function_decl("Inner", return_stmt(jsx("p"))), return_stmt(jsx("Inner")))),
        )
        result = lint(tree, {}, filename="src/components/App.tsx")
        rule_ids = sorted({v.rule_id for v in result.violations})
        self.assertEqual(
            rule_ids,
            [
                "enforce-kebab-case-filenames",
                "enforce-typography-components",
                "no-default-export",
                "no-nested-component",
                "require-jsdoc-on-component",
            ],
        )

    def test_no_enabled_rules(self) -> None:
        result = lint(program(export_default(ident("x"))), {"extends": []})
        self.assertEqual(result.violations, ())
        self.assertFalse(result.has_errors())

    def test_to_dict(self) -> None:
        result = lint(program(export_default(ident("x"))), {"extends": [], "rules": {"no-default-export": 1}})
        data = result.to_dict()
        self.assertEqual(data["file"], "src/components/app.tsx")
        self.assertEqual(data["warning_count"], 1)
        self.assertEqual(data["violations"][0]["rule_id"], "no-default-export")

    def test_deeply_nested_expression_is_traversed(self) -> None:
        result = lint(program(const("MESSAGE", concatenation(5000))), {})
        self.assertEqual(result.violations, ())
