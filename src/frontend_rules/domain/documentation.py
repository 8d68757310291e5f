"""Doc-comment detection and the shared shape of the require-jsdoc rules."""

from collections.abc import Callable
from typing import ClassVar

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.path_filter import PathFilter
from frontend_rules.domain.predicates import identifier_name, is_function_value
from frontend_rules.domain.rules import (
    STRING_ARRAY,
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)
from frontend_rules.domain.source_code import SourceCode

ANONYMOUS = "(anonymous)"


def is_root_level(node: Node) -> bool:
    """
    True when node sits directly in the Program body.

    `export` / `export default` wrappers at the top of the file do not count
    as nesting.
    """
    parent = node.parent
    if parent is None:
        return False
    if parent.type == "Program":
        return True
    return parent.is_export_declaration() and parent.parent is not None and parent.parent.type == "Program"


def documented_statement(node: Node) -> Node:
    """The statement a doc comment would sit above: the export wrapper if there is one."""
    parent = node.parent
    if parent is not None and parent.is_export_declaration():
        return parent
    return node


def has_jsdoc(node: Node, source_code: SourceCode) -> bool:
    """True if a `/** ... */` block is part of the comment run right before node."""
    return any(comment.is_doc_block for comment in source_code.get_comments_before(documented_statement(node)))


class JsdocRule(BaseRule):
    """
    Require a doc comment on root-level functions of one name shape.

    Subclasses pick the shape with `matches_name`. The `folders` option limits
    the rule to files matching at least one pattern.
    """

    matches_name: ClassVar[Callable[[str | None], bool]]
    message_id: ClassVar[str] = "missingJSDoc"

    @staticmethod
    def build_meta(description: str, message: str) -> RuleMeta:
        return RuleMeta(
            type="suggestion",
            description=description,
            category="Documentation",
            messages={"missingJSDoc": message},
            schema=options_schema(folders=STRING_ARRAY),
        )

    def create(self, context: RuleContext) -> Listeners:
        folders = context.option("folders")
        if folders is not None and not PathFilter(folders, root=context.cwd).matches(context.filename):
            return {}
        return super().create(context)

    def listeners(self, context: RuleContext) -> Listeners:
        source_code = context.source_code
        wants = type(self).matches_name

        def check_function(node: Node) -> None:
            if not is_root_level(node):
                return
            name = identifier_name(node.id)
            if not wants(name) or has_jsdoc(node, source_code):
                return
            context.report(node=node, message_id=self.message_id, data={"name": name or ANONYMOUS})

        def check_declaration(node: Node) -> None:
            if not is_root_level(node):
                return
            for declarator in node.declarations or []:
                if not is_function_value(declarator.init):
                    continue
                name = identifier_name(declarator.id)
                if not wants(name) or has_jsdoc(node, source_code):
                    continue
                context.report(
                    node=declarator,
                    message_id=self.message_id,
                    data={"name": name or ANONYMOUS},
                )

        return {
            "FunctionDeclaration": check_function,
            "VariableDeclaration": check_declaration,
        }
