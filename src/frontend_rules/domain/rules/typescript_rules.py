"""TypeScript declaration rules."""

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.rules import (
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)
from frontend_rules.domain.rules.naming_rules import TYPESCRIPT_SUFFIXES


class InterfaceTypeRequiredFirstRule(BaseRule):
    """In interfaces and object type literals, required fields precede optional ones."""

    name = "interface-type-required-first"
    meta = RuleMeta(
        type="suggestion",
        description="Require all required fields to come before optional fields in interfaces and types.",
        category="Best Practices",
        messages={
            "requiredBeforeOptional": (
                "Required field '{{name}}' should come before all optional fields in '{{parent}}'."
            ),
        },
        schema=options_schema(),
    )

    @staticmethod
    def members_of(container: Node | None) -> list[Node]:
        """Members of a TSInterfaceBody (`body`) or TSTypeLiteral (`members`)."""
        if container is None:
            return []
        if isinstance(container.body, list):
            return container.body
        if isinstance(container.members, list):
            return container.members
        return []

    def create(self, context: RuleContext) -> Listeners:
        if not context.filename.endswith(TYPESCRIPT_SUFFIXES):
            return {}
        return super().create(context)

    def listeners(self, context: RuleContext) -> Listeners:
        def check_members(container: Node | None, parent_name: str) -> None:
            found_optional = False
            for member in self.members_of(container):
                # Methods, index signatures and computed keys are not ordered.
                if member.type != "TSPropertySignature" or member.key is None:
                    continue
                key_name = member.key.name_text
                if not key_name:
                    continue
                if member.optional:
                    found_optional = True
                elif found_optional:
                    context.report(
                        node=member.key,
                        message_id="requiredBeforeOptional",
                        data={"name": key_name, "parent": parent_name},
                    )

        def check_interface(node: Node) -> None:
            check_members(node.body, (node.id.name_text if node.id else None) or "")

        def check_type_alias(node: Node) -> None:
            annotation = node.typeAnnotation
            if annotation is not None and annotation.type == "TSTypeLiteral":
                check_members(annotation, (node.id.name_text if node.id else None) or "")

        return {
            "TSInterfaceDeclaration": check_interface,
            "TSTypeAliasDeclaration": check_type_alias,
        }
