"""Pure message-building from rule message templates. No I/O."""

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")


class RuleMsgBuilder:
    """Interpolates `{{name}}` placeholders in rule messages."""

    @staticmethod
    def interpolate(template: str, data: Mapping[str, object] | None) -> str:
        """Replace each `{{key}}` with data[key]; unknown keys stay verbatim."""
        if not data:
            return template

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key in data:
                return str(data[key])
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, template)

    @staticmethod
    def resolve(messages: Mapping[str, str], message_id: str, data: Mapping[str, object] | None) -> str:
        """Look up message_id and interpolate it. Raises KeyError for an undeclared id."""
        return RuleMsgBuilder.interpolate(messages[message_id], data)
