"""Lint configuration. Immutable value object created by Infrastructure."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from jsonschema import Draft7Validator

from frontend_rules.domain.constants import RECOMMENDED_PRESET
from frontend_rules.domain.errors import InvalidRuleConfigError
from frontend_rules.domain.registry import PLUGIN, Plugin
from frontend_rules.domain.rules import Rule, Severity


@dataclass(frozen=True)
class RuleSetting:
    """Severity and positional options for one rule."""

    severity: Severity
    options: tuple[Any, ...] = ()

    @property
    def enabled(self) -> bool:
        return self.severity is not Severity.OFF


class LintConfiguration:
    """
    Which rules run, how severe they are, and their options.

    Created from the `[tool.frontend-rules]` dict at the composition root.
    Domain does not read the filesystem. Every option list is validated
    against the rule's JSON schema here, so rules never see malformed options.
    """

    def __init__(self, config_dict: Mapping[str, object] | None = None, plugin: Plugin = PLUGIN) -> None:
        """Resolve presets and per-rule entries once; no mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        self._plugin = plugin
        settings: dict[str, RuleSetting] = {}
        for preset in self._presets():
            for name, severity in plugin.preset(preset).items():
                settings[name] = RuleSetting(severity=severity)
        raw_rules = self._config.get("rules", {})
        if not isinstance(raw_rules, Mapping):
            raise InvalidRuleConfigError("*", "'rules' must be a table of rule name -> setting")
        for key, entry in raw_rules.items():
            name = plugin.resolve_name(str(key))
            settings[name] = self.parse_entry(plugin.rules[name], entry)
        self._settings = settings

    def _presets(self) -> list[str]:
        raw = self._config.get("extends", RECOMMENDED_PRESET)
        presets = [raw] if isinstance(raw, str) else list(raw) if isinstance(raw, Sequence) else None
        if presets is None or not all(isinstance(p, str) for p in presets):
            raise InvalidRuleConfigError("*", f"'extends' must be a preset name or list, got {raw!r}")
        for preset in presets:
            if preset not in self._plugin.configs:
                raise InvalidRuleConfigError("*", f"unknown preset '{preset}'")
        return presets

    @staticmethod
    def parse_entry(rule: Rule, entry: object) -> RuleSetting:
        """Parse `"warn"`, `2` or `["error", {...}]` and validate the options."""
        if isinstance(entry, (list, tuple)):
            if not entry:
                raise InvalidRuleConfigError(rule.name, "empty setting list")
            raw_severity, options = entry[0], tuple(entry[1:])
        else:
            raw_severity, options = entry, ()
        try:
            severity = Severity.parse(raw_severity)
        except ValueError as exc:
            raise InvalidRuleConfigError(rule.name, str(exc)) from exc
        LintConfiguration.validate_options(rule, options)
        return RuleSetting(severity=severity, options=options)

    @staticmethod
    def validate_options(rule: Rule, options: Sequence[Any]) -> None:
        """Check each positional option against the matching schema entry."""
        schema = rule.meta.schema
        if len(options) > len(schema):
            raise InvalidRuleConfigError(
                rule.name,
                f"expected at most {len(schema)} option(s), got {len(options)}",
            )
        for index, (option, option_schema) in enumerate(zip(options, schema)):
            errors = sorted(Draft7Validator(option_schema).iter_errors(option), key=lambda e: list(e.path))
            if errors:
                first = errors[0]
                where = "/".join(str(p) for p in first.path) or f"option {index}"
                raise InvalidRuleConfigError(rule.name, f"{where}: {first.message}")

    @property
    def config(self) -> dict[str, object]:
        return self._config

    @property
    def plugin(self) -> Plugin:
        return self._plugin

    def setting_for(self, rule_name: str) -> RuleSetting:
        return self._settings.get(rule_name, RuleSetting(severity=Severity.OFF))

    def enabled_rules(self) -> list[tuple[Rule, RuleSetting]]:
        """Enabled rules in registry order."""
        return [
            (rule, self._settings[name])
            for name, rule in self._plugin.rules.items()
            if name in self._settings and self._settings[name].enabled
        ]

    def with_overrides(self, overrides: Mapping[str, object]) -> "LintConfiguration":
        """New configuration with extra rule entries layered on top (CLI `--rule`)."""
        raw_rules = self._config.get("rules", {})
        merged = dict(raw_rules) if isinstance(raw_rules, Mapping) else {}
        merged.update(overrides)
        return LintConfiguration({**self._config, "rules": merged}, plugin=self._plugin)
