"""React structure rules: nested components and redundant fragments."""

from frontend_rules.domain.documentation import ANONYMOUS
from frontend_rules.domain.nodes import Node
from frontend_rules.domain.predicates import (
    get_meaningful_children,
    identifier_name,
    is_component,
    is_component_declarator,
    is_fragment_element,
)
from frontend_rules.domain.rules import (
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)


class NoNestedComponentRule(BaseRule):
    """
    Components must be declared at the top level of the file.

    An inner component is recreated on every render of its parent. Nesting is
    tracked with a stack that lives for one file: entering a component-shaped
    function or class pushes it, leaving pops it, and a push onto a non-empty
    stack is a violation.
    """

    name = "no-nested-component"
    meta = RuleMeta(
        type="problem",
        description="Disallow defining a new component inside another component.",
        category="Best Practices",
        messages={
            "noNestedComponent": (
                "Do not define a new component inside another component. "
                "Move '{{name}}' to the top level of the file."
            ),
        },
        schema=options_schema(),
    )

    def listeners(self, context: RuleContext) -> Listeners:
        component_stack: list[Node] = []

        def enter(node: Node, name: str | None) -> None:
            if component_stack:
                context.report(
                    node=node,
                    message_id="noNestedComponent",
                    data={"name": name or ANONYMOUS},
                )
            component_stack.append(node)

        def leave(node: Node) -> None:
            if component_stack and component_stack[-1] is node:
                component_stack.pop()

        def enter_declaration(node: Node) -> None:
            if is_component(node):
                enter(node, identifier_name(node.id))

        def enter_declarator(node: Node) -> None:
            if is_component_declarator(node):
                enter(node, identifier_name(node.id))

        return {
            "FunctionDeclaration": enter_declaration,
            "FunctionDeclaration:exit": leave,
            "ClassDeclaration": enter_declaration,
            "ClassDeclaration:exit": leave,
            "VariableDeclarator": enter_declarator,
            "VariableDeclarator:exit": leave,
        }


class NoUnnecessaryFragmentRule(BaseRule):
    """A fragment wrapping a single meaningful child adds nothing."""

    name = "no-unnecessary-fragment"
    meta = RuleMeta(
        type="suggestion",
        description="Warn if React fragments are unnecessary (e.g., wrapping a single child).",
        category="Best Practices",
        messages={
            "unnecessaryFragment": "Unnecessary React fragment: consider removing the fragment wrapper.",
        },
        schema=options_schema(),
    )

    @staticmethod
    def wraps_single_child(node: Node) -> bool:
        children = get_meaningful_children(node.children or [])
        return len(children) == 1 and children[0].type != "JSXFragment"

    def listeners(self, context: RuleContext) -> Listeners:
        def check_fragment(node: Node) -> None:
            if self.wraps_single_child(node):
                context.report(node=node, message_id="unnecessaryFragment")

        def check_element(node: Node) -> None:
            if is_fragment_element(node) and self.wraps_single_child(node):
                context.report(node=node, message_id="unnecessaryFragment")

        return {
            "JSXFragment": check_fragment,
            "JSXElement": check_element,
        }
