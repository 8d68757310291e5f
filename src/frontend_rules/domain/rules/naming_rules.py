"""Naming rules: constants, TypeScript declarations and file names."""

import re
from typing import ClassVar

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.predicates import is_function_value
from frontend_rules.domain.rules import (
    STRING_ARRAY,
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)

TYPESCRIPT_SUFFIXES: tuple[str, ...] = (".ts", ".tsx")


class TopLevelConstSnakeRule(BaseRule):
    """Top-level `const` bindings in .tsx files must be ALL_CAPS snake case."""

    name = "top-level-const-snake"
    meta = RuleMeta(
        type="suggestion",
        description="Require top-level consts to be ALL_CAPS (snake case)",
        category="Best Practices",
        messages={
            "topLevelConstCaps": 'Top-level const "{{name}}" should be ALL_CAPS (snake case).',
        },
        schema=options_schema(),
    )

    ALL_CAPS_SNAKE: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z][A-Z0-9_]*$")

    def create(self, context: RuleContext) -> Listeners:
        if not context.filename.endswith(".tsx"):
            return {}
        return super().create(context)

    def listeners(self, context: RuleContext) -> Listeners:
        def check_program(node: Node) -> None:
            for statement in node.body or []:
                if statement.type != "VariableDeclaration" or statement.kind != "const":
                    continue
                for declarator in statement.declarations or []:
                    # Functions follow component/hook naming instead.
                    if is_function_value(declarator.init):
                        continue
                    binding = declarator.id
                    if binding is None or binding.type != "Identifier":
                        continue
                    name = binding.name_text or ""
                    if not self.ALL_CAPS_SNAKE.match(name):
                        context.report(
                            node=binding,
                            message_id="topLevelConstCaps",
                            data={"name": name},
                        )

        return {"Program": check_program}


class EnforceInterfaceTypeNamingRule(BaseRule):
    """Interfaces start with `I` or end with `Props`; type aliases start with `T` or end with `Props`."""

    name = "enforce-interface-type-naming"
    meta = RuleMeta(
        type="suggestion",
        description=(
            "Enforce 'I' prefix or 'Props' suffix for interfaces, and 'T' prefix or "
            "'Props' suffix for types in TypeScript files."
        ),
        category="Best Practices",
        messages={
            "badInterfaceName": "Interface '{{name}}' should start with 'I' or end with 'Props'.",
            "badTypeName": "Type '{{name}}' should start with 'T' or end with 'Props'.",
        },
        schema=options_schema(),
    )

    INTERFACE_NAME: ClassVar[re.Pattern[str]] = re.compile(r"^(I[A-Z][A-Za-z0-9]*|[A-Za-z0-9]+Props)$")
    TYPE_NAME: ClassVar[re.Pattern[str]] = re.compile(r"^(T[A-Z][A-Za-z0-9]*|[A-Za-z0-9]+Props)$")

    def create(self, context: RuleContext) -> Listeners:
        if not context.filename.endswith(TYPESCRIPT_SUFFIXES):
            return {}
        return super().create(context)

    def listeners(self, context: RuleContext) -> Listeners:
        def check(node: Node, pattern: re.Pattern[str], message_id: str) -> None:
            if node.id is None:
                return
            name = node.id.name_text or ""
            if not pattern.match(name):
                context.report(node=node.id, message_id=message_id, data={"name": name})

        return {
            "TSInterfaceDeclaration": lambda node: check(node, self.INTERFACE_NAME, "badInterfaceName"),
            "TSTypeAliasDeclaration": lambda node: check(node, self.TYPE_NAME, "badTypeName"),
        }


class EnforceKebabCaseFilenamesRule(BaseRule):
    """File names (up to the first dot) must be kebab-case."""

    name = "enforce-kebab-case-filenames"
    meta = RuleMeta(
        type="suggestion",
        description="Enforce kebab-case format for file names (e.g., my-component.tsx)",
        category="Best Practices",
        messages={
            "notKebabCase": 'File name "{{filename}}" should be in kebab-case (e.g., my-component.tsx).',
        },
        schema=options_schema(
            extensions={**STRING_ARRAY, "default": [".js", ".ts", ".jsx", ".tsx"]},
        ),
    )

    DEFAULT_EXTENSIONS: ClassVar[tuple[str, ...]] = (".js", ".ts", ".jsx", ".tsx")
    KEBAB_CASE: ClassVar[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

    @classmethod
    def is_kebab_case_name(cls, base_name: str) -> bool:
        """Check only the part before the first dot (`my-file.test.tsx` -> `my-file`)."""
        return cls.KEBAB_CASE.match(base_name.split(".")[0]) is not None

    def listeners(self, context: RuleContext) -> Listeners:
        extensions = tuple(context.option("extensions", self.DEFAULT_EXTENSIONS))
        base_name = re.split(r"[\\/]", context.filename)[-1]
        if not base_name or not base_name.endswith(extensions):
            return {}

        def check_program(node: Node) -> None:
            if not self.is_kebab_case_name(base_name):
                context.report(loc=(1, 0), message_id="notKebabCase", data={"filename": base_name})

        return {"Program": check_program}
