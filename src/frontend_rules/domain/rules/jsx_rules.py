"""JSX rules: design-system tags, colors, accessibility and prop hygiene."""

import json
import logging
import re
from typing import ClassVar

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.predicates import (
    find_jsx_attribute,
    identifier_name,
    jsx_attribute_name,
    jsx_element_tag,
    string_literal_value,
    template_text,
)
from frontend_rules.domain.rules import (
    BaseRule,
    Fix,
    Listeners,
    RuleContext,
    RuleMeta,
    options_schema,
)

logger = logging.getLogger(__name__)


class EnforceTypographyComponentsRule(BaseRule):
    """Raw text tags must go through the Typography components."""

    name = "enforce-typography-components"
    meta = RuleMeta(
        type="problem",
        description="Enforce usage of Typography components instead of raw HTML tags",
        category="Best Practices",
        messages={
            "useTypography": (
                "Raw <{{tag}}> tag detected. For consistent design and theming, use the "
                "corresponding Typography component (e.g., TypographyP, TypographyH1, "
                "TypographyBlockquote, etc.) instead. Import these from components/ui/typography. "
                "Native tags are only allowed in typography.tsx."
            ),
        },
        schema=options_schema(),
    )

    FORBIDDEN_TAGS: ClassVar[frozenset[str]] = frozenset(
        {"p", "span", "h1", "h2", "h3", "h4", "h5", "h6", "blockquote"}
    )
    TYPOGRAPHY_FILE: ClassVar[re.Pattern[str]] = re.compile(r"typography\.tsx$")

    def create(self, context: RuleContext) -> Listeners:
        # The Typography components themselves render the native tags.
        if self.TYPOGRAPHY_FILE.search(context.filename):
            return {}
        return super().create(context)

    def listeners(self, context: RuleContext) -> Listeners:
        def check_opening(node: Node) -> None:
            tag = jsx_element_tag(node)
            if tag in self.FORBIDDEN_TAGS:
                context.report(node=node, message_id="useTypography", data={"tag": tag})

        return {"JSXOpeningElement": check_opening}


class NoDirectColorsRule(BaseRule):
    """Colors come from CSS variables or theme tokens, never literals."""

    name = "no-direct-colors"
    meta = RuleMeta(
        type="problem",
        description="Disallow direct color values in styles or classNames. Use CSS variables or theme tokens.",
        category="Best Practices",
        messages={
            "noDirectColor": (
                "Do not use direct color values (e.g., '#fff', 'red', 'rgb(0,0,0)') in styles "
                "or classNames. Use CSS variables or theme tokens instead."
            ),
        },
        schema=options_schema(),
    )

    COLOR_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"#([0-9a-fA-F]{3,8})|rgba?\([^)]*\)|hsla?\([^)]*\)|"
        r"\b(aliceblue|antiquewhite|aqua|black|blue|brown|chartreuse|coral|crimson|cyan|"
        r"fuchsia|gold|gray|green|indigo|ivory|khaki|lavender|lime|linen|magenta|maroon|"
        r"navy|olive|orange|orchid|peru|pink|plum|purple|red|salmon|sienna|silver|skyblue|"
        r"tan|teal|thistle|tomato|turquoise|violet|white|yellow)\b",
        re.IGNORECASE,
    )
    STYLE_COLOR_KEYS: ClassVar[frozenset[str]] = frozenset(
        {"color", "background", "backgroundColor", "borderColor"}
    )

    @classmethod
    def contains_color(cls, value: object) -> bool:
        return isinstance(value, str) and cls.COLOR_PATTERN.search(value) is not None

    def listeners(self, context: RuleContext) -> Listeners:
        logger.debug("Checking %s for direct color values in styles or classNames", context.filename)

        def check_value(node: Node, value: object) -> None:
            if self.contains_color(value):
                context.report(node=node, message_id="noDirectColor")

        def check_style_object(expression: Node) -> None:
            # style={{ color: '#fff' }}
            for prop in expression.properties or []:
                if prop.type != "Property" or identifier_name(prop.key) not in self.STYLE_COLOR_KEYS:
                    continue
                value = prop.value
                if value is None:
                    continue
                if value.type == "Literal":
                    check_value(value, value.value)
                elif value.type == "TemplateLiteral":
                    check_value(value, template_text(value))

        def check_attribute(node: Node) -> None:
            attribute = jsx_attribute_name(node)
            if attribute not in ("style", "className") or node.value is None:
                return
            value = node.value
            if value.type == "Literal":
                # className="bg-[#fff] text-red"
                check_value(value, value.value)
                return
            if value.type != "JSXExpressionContainer" or value.expression is None:
                return
            expression = value.expression
            if attribute == "style" and expression.type == "ObjectExpression":
                check_style_object(expression)
            elif attribute == "className":
                if expression.type == "Literal":
                    check_value(value, expression.value)
                elif expression.type == "TemplateLiteral":
                    check_value(value, template_text(expression))

        return {"JSXAttribute": check_attribute}


class NoFocusableNonInteractiveElementsRule(BaseRule):
    """Clickable non-interactive elements need a button role or keyboard handling."""

    name = "no-focusable-non-interactive-elements"
    meta = RuleMeta(
        type="suggestion",
        description=(
            'Flag non-interactive elements with onClick. Suggest role="button" or using '
            "<button>, and onKeyDown for accessibility."
        ),
        category="Accessibility",
        messages={
            "nonInteractive": (
                "Non-interactive element <{{tag}}> with onClick detected. Consider using <button> "
                'or adding role="button" and onKeyDown for accessibility.'
            ),
        },
        schema=options_schema(),
    )

    INTERACTIVE_ELEMENTS: ClassVar[frozenset[str]] = frozenset(
        {
            "button",
            "a",
            "input",
            "select",
            "textarea",
            "option",
            "details",
            "summary",
            "label",
            "iframe",
            "audio",
            "video",
            "area",
            "menuitem",
            "progress",
            "meter",
        }
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_opening(node: Node) -> None:
            tag = jsx_element_tag(node)
            if not tag:
                return
            # Custom components decide their own semantics.
            if tag[0] == tag[0].upper():
                return
            if tag in self.INTERACTIVE_ELEMENTS:
                return
            if find_jsx_attribute(node, "onClick") is None:
                return
            role = find_jsx_attribute(node, "role")
            has_role_button = role is not None and string_literal_value(role.value) == "button"
            has_on_key_down = find_jsx_attribute(node, "onKeyDown") is not None
            logger.debug(
                "Checking <%s>: hasOnClick=True, hasRoleButton=%s, hasOnKeyDown=%s",
                tag,
                has_role_button,
                has_on_key_down,
            )
            if not has_role_button and not has_on_key_down:
                context.report(node=node, message_id="nonInteractive", data={"tag": tag})

        return {"JSXOpeningElement": check_opening}


class NoInlineArrowFunctionsInJsxRule(BaseRule):
    """`onClick={() => ...}` creates a new function on every render."""

    name = "no-inline-arrow-functions-in-jsx"
    meta = RuleMeta(
        type="suggestion",
        description="Disallow inline arrow functions in JSX props (e.g., onClick={() => ...}) for better performance.",
        category="Best Practices",
        messages={
            "noInlineArrow": (
                "Avoid inline arrow functions in JSX props (e.g., onClick). Define the function "
                "outside the render method for better performance."
            ),
        },
        schema=options_schema(),
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_attribute(node: Node) -> None:
            value = node.value
            if (
                value is not None
                and value.type == "JSXExpressionContainer"
                and value.expression is not None
                and value.expression.type == "ArrowFunctionExpression"
            ):
                context.report(node=value, message_id="noInlineArrow")

        return {"JSXAttribute": check_attribute}


class NoUnnecessaryCurlyInPropsRule(BaseRule):
    """`name={'xyz'}` should be written `name='xyz'`. Fixable."""

    name = "no-unnecessary-curly-in-props"
    meta = RuleMeta(
        type="suggestion",
        description="Disallow unnecessary curly braces for string literal props in JSX.",
        category="Stylistic Issues",
        messages={
            "unnecessaryCurly": "Unnecessary curly braces for string literal prop '{{prop}}'. Use plain string instead.",
        },
        schema=options_schema(),
        fixable="code",
    )

    def listeners(self, context: RuleContext) -> Listeners:
        def check_attribute(node: Node) -> None:
            value = node.value
            if value is None or value.type != "JSXExpressionContainer":
                return
            literal = value.expression
            text = string_literal_value(literal)
            if text is None:
                return
            raw = literal.raw if isinstance(literal.raw, str) else json.dumps(text)
            context.report(
                node=value,
                message_id="unnecessaryCurly",
                data={"prop": jsx_attribute_name(node) or ""},
                fix=Fix.replace_text(value, raw),
            )

        return {"JSXAttribute": check_attribute}
