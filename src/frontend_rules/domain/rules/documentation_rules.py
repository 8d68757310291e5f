"""Documentation rules: doc comments on root-level components, hooks and functions."""

from frontend_rules.domain.documentation import JsdocRule
from frontend_rules.domain.predicates import (
    is_component_name,
    is_hook_name,
    is_root_function_name,
)


class RequireJsdocOnComponentRule(JsdocRule):
    """Root-level React components need a JSDoc comment."""

    name = "require-jsdoc-on-component"
    meta = JsdocRule.build_meta(
        "Require JSDoc comment for root-level React components",
        'React component "{{name}}" should have a JSDoc comment.',
    )
    matches_name = staticmethod(is_component_name)


class RequireJsdocOnHookRule(JsdocRule):
    """Root-level hooks (useSomething) need a JSDoc comment."""

    name = "require-jsdoc-on-hook"
    meta = JsdocRule.build_meta(
        "Require JSDoc comment for root-level React hooks",
        'React hook "{{name}}" should have a JSDoc comment.',
    )
    matches_name = staticmethod(is_hook_name)


class RequireJsdocOnRootFunctionRule(JsdocRule):
    """Every other root-level function needs a JSDoc comment."""

    name = "require-jsdoc-on-root-function"
    meta = JsdocRule.build_meta(
        "Require JSDoc comment for root-level functions",
        'Root-level function "{{name}}" should have a JSDoc comment.',
    )
    matches_name = staticmethod(is_root_function_name)
