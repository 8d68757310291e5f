"""Frontend lint rules for React / TypeScript code over ESTree syntax trees."""

from frontend_rules.domain.registry import ALL_RULES, PLUGIN, Plugin

__all__ = ["ALL_RULES", "PLUGIN", "Plugin"]
