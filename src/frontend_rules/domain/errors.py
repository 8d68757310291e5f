"""Exceptions raised by the lint host. Rules themselves never raise for ordinary input."""


class FrontendRulesError(Exception):
    """Base class for every error this package raises on purpose."""


class UnknownRuleError(FrontendRulesError):
    """Configuration names a rule the registry does not provide."""

    def __init__(self, rule_name: str) -> None:
        super().__init__(f"Unknown rule '{rule_name}'.")
        self.rule_name = rule_name


class InvalidRuleConfigError(FrontendRulesError):
    """A rule's severity or options do not match what the rule accepts."""

    def __init__(self, rule_name: str, detail: str) -> None:
        super().__init__(f"Invalid configuration for rule '{rule_name}': {detail}")
        self.rule_name = rule_name
        self.detail = detail


class AstLoadError(FrontendRulesError):
    """A serialized syntax tree could not be read or is not an ESTree Program."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Cannot load syntax tree from {path}: {detail}")
        self.path = path
        self.detail = detail


class NotAnAstError(AstLoadError):
    """A JSON file that is neither a Program nor an envelope (package.json, tsconfig.json)."""
