"""Module rules: export style and import specifiers."""

from typing import ClassVar

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.path_filter import PathFilter
from frontend_rules.domain.rules import (
    STRING_ARRAY,
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)


class NoDefaultExportRule(BaseRule):
    """Named exports only."""

    name = "no-default-export"
    meta = RuleMeta(
        type="suggestion",
        description="Disallow default exports; enforce named exports only.",
        category="Best Practices",
        messages={
            "noDefaultExport": "Default export is not allowed. Use named exports instead.",
        },
        schema=options_schema(),
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_export(node: Node) -> None:
            context.report(node=node, message_id="noDefaultExport")

        return {"ExportDefaultDeclaration": check_export}


class EnforceAliasImportPathsRule(BaseRule):
    """
    Relative imports must use a configured alias instead.

    `aliases` lists accepted prefixes (default `@`). `ignore` patterns skip
    whole files and also individual import specifiers (`*.css`).
    """

    name = "enforce-alias-import-paths"
    meta = RuleMeta(
        type="problem",
        description=(
            "Enforce use of alias import paths instead of relative paths. Supports "
            "configuration of allowed aliases and ignore patterns in your config."
        ),
        category="Best Practices",
        messages={
            "noRelativeImport": (
                'Relative import path "{{importPath}}" detected. Use an alias import path '
                "(e.g., {{aliases}}) instead."
            ),
        },
        schema=options_schema(aliases=STRING_ARRAY),
    )

    DEFAULT_ALIASES: ClassVar[tuple[str, ...]] = ("@",)

    @staticmethod
    def is_relative(import_path: str) -> bool:
        """Package imports (`react`, `@scope/pkg`) are never relative."""
        return import_path.startswith((".", "/"))

    def listeners(self, context: RuleContext) -> Listeners:
        aliases = tuple(context.option("aliases", self.DEFAULT_ALIASES))
        specifier_filter = PathFilter(context.option("ignore") or [])

        def check_import(node: Node) -> None:
            source = node.source
            if source is None:
                return
            import_path = source.value
            if not isinstance(import_path, str) or not self.is_relative(import_path):
                return
            if specifier_filter.matches(import_path):
                return
            if import_path.startswith(aliases):
                return
            context.report(
                node=source,
                message_id="noRelativeImport",
                data={"importPath": import_path, "aliases": ", ".join(aliases)},
            )

        return {"ImportDeclaration": check_import}
