"""Plugin registry: every rule by name and the recommended severity bundle."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from frontend_rules.domain.constants import PLUGIN_NAMESPACE
from frontend_rules.domain.errors import UnknownRuleError
from frontend_rules.domain.rules import Rule, Severity
from frontend_rules.domain.rules.classname_rules import (
    EnforceClassnameUtilityRule,
    EnforceNoEmptyClassnameUtilityRule,
    NoEmptyTailwindClassRule,
)
from frontend_rules.domain.rules.documentation_rules import (
    RequireJsdocOnComponentRule,
    RequireJsdocOnHookRule,
    RequireJsdocOnRootFunctionRule,
)
from frontend_rules.domain.rules.jsx_rules import (
    EnforceTypographyComponentsRule,
    NoDirectColorsRule,
    NoFocusableNonInteractiveElementsRule,
    NoInlineArrowFunctionsInJsxRule,
    NoUnnecessaryCurlyInPropsRule,
)
from frontend_rules.domain.rules.module_rules import (
    EnforceAliasImportPathsRule,
    NoDefaultExportRule,
)
from frontend_rules.domain.rules.naming_rules import (
    EnforceInterfaceTypeNamingRule,
    EnforceKebabCaseFilenamesRule,
    TopLevelConstSnakeRule,
)
from frontend_rules.domain.rules.react_rules import (
    NoNestedComponentRule,
    NoUnnecessaryFragmentRule,
)
from frontend_rules.domain.rules.typescript_rules import InterfaceTypeRequiredFirstRule

# Registration order is also the order listeners fire for the same node.
ALL_RULES: tuple[Rule, ...] = (
    EnforceTypographyComponentsRule(),
    NoDirectColorsRule(),
    TopLevelConstSnakeRule(),
    NoFocusableNonInteractiveElementsRule(),
    EnforceKebabCaseFilenamesRule(),
    EnforceInterfaceTypeNamingRule(),
    NoDefaultExportRule(),
    NoInlineArrowFunctionsInJsxRule(),
    InterfaceTypeRequiredFirstRule(),
    EnforceAliasImportPathsRule(),
    NoNestedComponentRule(),
    RequireJsdocOnComponentRule(),
    RequireJsdocOnHookRule(),
    RequireJsdocOnRootFunctionRule(),
    EnforceClassnameUtilityRule(),
    EnforceNoEmptyClassnameUtilityRule(),
    NoEmptyTailwindClassRule(),
    NoUnnecessaryCurlyInPropsRule(),
    NoUnnecessaryFragmentRule(),
)

RECOMMENDED_SEVERITIES: Mapping[str, Severity] = MappingProxyType(
    {
        "enforce-typography-components": Severity.ERROR,
        "no-direct-colors": Severity.ERROR,
        "top-level-const-snake": Severity.ERROR,
        "no-focusable-non-interactive-elements": Severity.ERROR,
        "enforce-kebab-case-filenames": Severity.ERROR,
        "enforce-interface-type-naming": Severity.ERROR,
        "no-default-export": Severity.ERROR,
        "interface-type-required-first": Severity.ERROR,
        "no-inline-arrow-functions-in-jsx": Severity.WARN,
        "enforce-alias-import-paths": Severity.WARN,
        "no-nested-component": Severity.ERROR,
        "require-jsdoc-on-component": Severity.WARN,
        "require-jsdoc-on-hook": Severity.WARN,
        "require-jsdoc-on-root-function": Severity.WARN,
        "enforce-classname-utility": Severity.WARN,
        "enforce-no-empty-classname-utility": Severity.WARN,
        "no-empty-tailwind-class": Severity.WARN,
        "no-unnecessary-curly-in-props": Severity.WARN,
        "no-unnecessary-fragment": Severity.WARN,
    }
)


@dataclass(frozen=True)
class Plugin:
    """Rules by name plus named severity bundles, keyed `<namespace>/<rule>`."""

    namespace: str
    rules: Mapping[str, Rule]
    configs: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    @classmethod
    def build(cls, rules: tuple[Rule, ...] = ALL_RULES) -> "Plugin":
        by_name = {rule.name: rule for rule in rules}
        recommended = {
            f"{PLUGIN_NAMESPACE}/{name}": RECOMMENDED_SEVERITIES.get(name, Severity.ERROR).value
            for name in by_name
        }
        return cls(
            namespace=PLUGIN_NAMESPACE,
            rules=MappingProxyType(by_name),
            configs=MappingProxyType({"recommended": MappingProxyType(recommended)}),
        )

    def qualified_name(self, rule_name: str) -> str:
        return f"{self.namespace}/{rule_name}"

    def resolve_name(self, key: str) -> str:
        """Accept `rule` or `<namespace>/rule`; raise UnknownRuleError otherwise."""
        prefix = f"{self.namespace}/"
        name = key[len(prefix):] if key.startswith(prefix) else key
        if name not in self.rules:
            raise UnknownRuleError(key)
        return name

    def get_rule(self, key: str) -> Rule:
        return self.rules[self.resolve_name(key)]

    def preset(self, config_name: str) -> dict[str, Severity]:
        """Severities of a named bundle, keyed by bare rule name."""
        bundle = self.configs.get(config_name)
        if bundle is None:
            raise KeyError(config_name)
        return {self.resolve_name(key): Severity.parse(value) for key, value in bundle.items()}


PLUGIN = Plugin.build()
