"""Tests for interface-type-required-first."""

import unittest

from tests.unit.estree_builders import (
    ident,
    place,
    program,
    run_rule,
    ts_interface,
    ts_property,
    ts_type_alias,
    ts_type_literal,
)


class TestInterfaceTypeRequiredFirst(unittest.TestCase):
    RULE = "interface-type-required-first"

    def test_required_after_optional_reported_on_key(self) -> None:
        text = "interface IUser { nickname?: string; id: string; }"
        late = ts_property("id")
        place(late["key"], text, "id")
        tree = program(ts_interface("IUser", ts_property("nickname", optional=True), late))
        violations = run_rule(self.RULE, tree, filename="src/types.ts", text=text)
        self.assertEqual(len(violations), 1)
        self.assertEqual(
            violations[0].message,
            "Required field 'id' should come before all optional fields in 'IUser'.",
        )
        self.assertEqual(violations[0].column, text.index("id:"))

    def test_required_first_passes(self) -> None:
        tree = program(ts_interface("IUser", ts_property("id"), ts_property("nickname", optional=True)))
        self.assertEqual(run_rule(self.RULE, tree, filename="src/types.ts"), [])

    def test_every_late_required_field_reported(self) -> None:
        tree = program(
            ts_interface(
                "IUser",
                ts_property("a", optional=True),
                ts_property("b"),
                ts_property("c"),
            )
        )
        violations = run_rule(self.RULE, tree, filename="src/types.ts")
        self.assertEqual([v.data["name"] for v in violations], ["b", "c"])

    def test_type_literal_alias(self) -> None:
        tree = program(ts_type_alias("TProps", ts_type_literal(ts_property("a", optional=True), ts_property("b"))))
        violations = run_rule(self.RULE, tree, filename="src/types.tsx")
        self.assertEqual([v.data for v in violations], [{"name": "b", "parent": "TProps"}])

    def test_non_literal_alias_passes(self) -> None:
        self.assertEqual(run_rule(self.RULE, program(ts_type_alias("TId")), filename="src/types.ts"), [])

    def test_methods_and_computed_keys_ignored(self) -> None:
        method = {"type": "TSMethodSignature", "key": ident("run"), "optional": False}
        computed = ts_property("x")
        computed["key"] = {"type": "Literal", "value": "x"}
        tree = program(ts_interface("IThing", ts_property("a", optional=True), method, computed))
        self.assertEqual(run_rule(self.RULE, tree, filename="src/types.ts"), [])

    def test_javascript_files_skipped(self) -> None:
        tree = program(ts_interface("IUser", ts_property("a", optional=True), ts_property("b")))
        self.assertEqual(run_rule(self.RULE, tree, filename="src/types.js"), [])
