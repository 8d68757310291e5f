"""className rules: class utilities and empty class strings."""

from typing import ClassVar

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.predicates import (
    jsx_attribute_name,
    string_literal_value,
    template_text,
)
from frontend_rules.domain.rules import (
    STRING_ARRAY,
    BaseRule,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)


def empty_class_value(attribute: Node) -> Node | None:
    """
    The node holding a blank className, if any.

    Covers `className=" "`, `className={" "}` and `` className={` `} ``
    (a template without expressions).
    """
    if jsx_attribute_name(attribute) != "className":
        return None
    value = attribute.value
    if value is None:
        return None
    if value.type == "Literal":
        text = string_literal_value(value)
        return value if text is not None and not text.strip() else None
    if value.type != "JSXExpressionContainer" or value.expression is None:
        return None
    expression = value.expression
    if expression.type == "Literal":
        text = string_literal_value(expression)
        return expression if text is not None and not text.strip() else None
    if expression.type == "TemplateLiteral":
        quasis = expression.quasis or []
        if len(quasis) == 1:
            raw = quasis[0].value.get("raw") if isinstance(quasis[0].value, dict) else None
            if isinstance(raw, str) and not raw.strip():
                return expression
    return None


class EnforceClassnameUtilityRule(BaseRule):
    """Template-string classNames should go through a helper such as `cn`."""

    name = "enforce-classname-utility"
    meta = RuleMeta(
        type="suggestion",
        description="Encourage use of a function/library (e.g., cn) for className instead of string literals.",
        category="Best Practices",
        messages={
            "useCn": "Use a function or library (e.g., cn) to handle className instead of a string literal.",
        },
        schema=options_schema(
            allow={
                **STRING_ARRAY,
                "description": "Allow these string literal values for className (e.g., empty string)",
            },
        ),
    )

    DEFAULT_ALLOW: ClassVar[tuple[str, ...]] = ("",)

    def listeners(self, context: RuleContext) -> Listeners:
        allow = frozenset(context.option("allow", self.DEFAULT_ALLOW))

        def is_allowed(template: Node) -> bool:
            # Only templates without interpolations can equal an allowed literal.
            if template.expressions:
                return False
            return template_text(template) in allow

        def check_attribute(node: Node) -> None:
            if jsx_attribute_name(node) != "className":
                return
            value = node.value
            if value is None or value.type != "JSXExpressionContainer":
                return
            expression = value.expression
            if expression is None or expression.type != "TemplateLiteral":
                return
            if is_allowed(expression):
                return
            context.report(node=value, message_id="useCn")

        return {"JSXAttribute": check_attribute}


class EnforceNoEmptyClassnameUtilityRule(BaseRule):
    """Empty or whitespace-only className values."""

    name = "enforce-no-empty-classname-utility"
    meta = RuleMeta(
        type="suggestion",
        description="Disallow empty className strings",
        category="Best Practices",
        messages={
            "emptyClassName": "Empty className string found. Remove it or add valid classes.",
        },
        schema=options_schema(),
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_attribute(node: Node) -> None:
            target = empty_class_value(node)
            if target is not None:
                context.report(node=target, message_id="emptyClassName")

        return {"JSXAttribute": check_attribute}


class NoEmptyTailwindClassRule(BaseRule):
    """Same detection as the empty className rule, worded for Tailwind projects."""

    name = "no-empty-tailwind-class"
    meta = RuleMeta(
        type="suggestion",
        description="Disallow empty Tailwind CSS class strings",
        category="Best Practices",
        messages={
            "emptyTailwindClass": "Empty Tailwind CSS class string found. Remove it or add classes.",
        },
        schema=options_schema(),
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_attribute(node: Node) -> None:
            target = empty_class_value(node)
            if target is not None:
                context.report(node=target, message_id="emptyTailwindClass")

        return {"JSXAttribute": check_attribute}
