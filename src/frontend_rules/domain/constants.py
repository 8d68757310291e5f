"""Plugin-wide constants."""

PLUGIN_NAMESPACE: str = "eslint-frontend-rules"

# pyproject.toml section: [tool.frontend-rules]
CONFIG_SECTION: str = "frontend-rules"

RECOMMENDED_PRESET: str = "recommended"

# Exit codes of the `check` command.
EXIT_CLEAN: int = 0
EXIT_VIOLATIONS: int = 1
EXIT_USAGE_ERROR: int = 2
