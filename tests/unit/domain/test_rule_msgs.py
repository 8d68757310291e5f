"""Unit tests for RuleMsgBuilder (domain/rule_msgs.py)."""

import unittest

from frontend_rules.domain.rule_msgs import RuleMsgBuilder


class TestRuleMsgBuilderInterpolate(unittest.TestCase):
    """Tests for RuleMsgBuilder.interpolate."""

    def test_replaces_placeholders(self) -> None:
        message = RuleMsgBuilder.interpolate('Move "{{name}}" to {{ where }}.', {"name": "Inner", "where": "the top"})
        self.assertEqual(message, 'Move "Inner" to the top.')

    def test_unknown_placeholder_stays_verbatim(self) -> None:
        message = RuleMsgBuilder.interpolate("{{name}} and {{other}}", {"name": "x"})
        self.assertEqual(message, "x and {{other}}")

    def test_no_data_returns_template(self) -> None:
        self.assertEqual(RuleMsgBuilder.interpolate("Use {{tag}}", None), "Use {{tag}}")


class TestRuleMsgBuilderResolve(unittest.TestCase):
    """Tests for RuleMsgBuilder.resolve."""

    def test_resolves_declared_message(self) -> None:
        messages = {"badTypeName": "Type '{{name}}' is bad."}
        self.assertEqual(RuleMsgBuilder.resolve(messages, "badTypeName", {"name": "Foo"}), "Type 'Foo' is bad.")

    def test_undeclared_message_id_raises(self) -> None:
        with self.assertRaises(KeyError):
            RuleMsgBuilder.resolve({}, "missing", None)
