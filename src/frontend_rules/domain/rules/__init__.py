"""Domain models for rules and violations."""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Protocol

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.path_filter import PathFilter
from frontend_rules.domain.rule_msgs import RuleMsgBuilder
from frontend_rules.domain.source_code import SourceCode

__all__ = [
    "BaseRule",
    "Fix",
    "Listener",
    "Listeners",
    "Rule",
    "RuleContext",
    "RuleMeta",
    "Severity",
    "Violation",
    "options_schema",
]

Listener = Callable[[Node], None]
Listeners = dict[str, Listener]

STRING_ARRAY: dict[str, Any] = {"type": "array", "items": {"type": "string"}}


def options_schema(**properties: Mapping[str, Any]) -> tuple[dict[str, Any], ...]:
    """Schema for the single options object every rule takes; always includes `ignore`."""
    return (
        {
            "type": "object",
            "properties": {"ignore": STRING_ARRAY, **properties},
            "additionalProperties": False,
        },
    )


class Severity(Enum):
    """Severity levels, accepted as names or as 0/1/2 in configuration."""

    OFF = "off"
    WARN = "warn"
    ERROR = "error"

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Raise ValueError for anything that is not off/warn/error or 0/1/2."""
        if isinstance(value, bool):
            raise ValueError(f"invalid severity {value!r}")
        if isinstance(value, int):
            by_level = {0: cls.OFF, 1: cls.WARN, 2: cls.ERROR}
            if value in by_level:
                return by_level[value]
            raise ValueError(f"invalid severity {value!r}")
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "warning":
                return cls.WARN
            return cls(normalized)
        raise ValueError(f"invalid severity {value!r}")


@dataclass(frozen=True)
class Fix:
    """Replace the half-open character range [start, end) with text."""

    range: tuple[int, int]
    text: str

    @classmethod
    def replace_text(cls, node: Node, text: str) -> "Fix | None":
        if node.start is None or node.end is None:
            return None
        return cls(range=(node.start, node.end), text=text)


@dataclass(frozen=True)
class Violation:
    """A diagnostic emitted by a rule."""

    rule_id: str
    message_id: str
    message: str
    line: int
    column: int
    file_path: str = ""
    node: Node | None = field(default=None, compare=False, repr=False)
    data: Mapping[str, str] = field(default_factory=dict)
    severity: Severity = Severity.ERROR
    fix: Fix | None = None

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"

    @property
    def fixable(self) -> bool:
        return self.fix is not None

    def with_severity(self, severity: Severity) -> "Violation":
        return replace(self, severity=severity)

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation."""
        return {
            "rule_id": self.rule_id,
            "message_id": self.message_id,
            "message": self.message,
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "severity": self.severity.value,
            "data": dict(self.data),
            "fix": (
                {"range": list(self.fix.range), "text": self.fix.text} if self.fix else None
            ),
        }


@dataclass(frozen=True)
class RuleMeta:
    """What a rule reports, which options it takes, and whether it can fix."""

    type: str
    description: str
    category: str
    messages: Mapping[str, str]
    schema: tuple[Mapping[str, Any], ...] = ()
    fixable: str | None = None


class RuleContext:
    """
    Per-file, per-rule view handed to `Rule.create`.

    Created fresh for every file; reports go to the sink list the host owns.
    """

    def __init__(
        self,
        *,
        rule_id: str,
        meta: RuleMeta,
        filename: str,
        source_code: SourceCode,
        options: Sequence[Any] = (),
        cwd: str | None = None,
        severity: Severity = Severity.ERROR,
        sink: list[Violation] | None = None,
    ) -> None:
        self.rule_id = rule_id
        self.meta = meta
        self.filename = filename
        self.source_code = source_code
        self.options: tuple[Any, ...] = tuple(options)
        self.cwd = cwd
        self.severity = severity
        self.violations: list[Violation] = sink if sink is not None else []

    def option(self, key: str, default: Any = None) -> Any:
        """Read a key of the first (object) option, as rules conventionally do."""
        first = self.options[0] if self.options else None
        if isinstance(first, Mapping) and key in first:
            return first[key]
        return default

    def report(
        self,
        *,
        message_id: str,
        node: Node | None = None,
        data: Mapping[str, object] | None = None,
        loc: tuple[int, int] | None = None,
        fix: Fix | None = None,
    ) -> Violation:
        """Record a violation at node (or at loc=(line, column) when there is no node)."""
        if node is not None:
            line, column = self.source_code.node_location(node)
        elif loc is not None:
            line, column = loc
        else:
            line, column = 1, 0
        string_data = {key: str(value) for key, value in (data or {}).items()}
        violation = Violation(
            rule_id=self.rule_id,
            message_id=message_id,
            message=RuleMsgBuilder.resolve(self.meta.messages, message_id, string_data),
            line=line,
            column=column,
            file_path=self.filename,
            node=node,
            data=string_data,
            severity=self.severity,
            fix=fix if self.meta.fixable else None,
        )
        self.violations.append(violation)
        return violation


class Rule(Protocol):
    """The host contract: metadata plus a per-file listener factory."""

    name: str
    meta: RuleMeta

    def create(self, context: RuleContext) -> Listeners:
        """Return node-type (or `Type:exit`) -> callback for one file."""
        ...


class BaseRule:
    """
    Rule skeleton that honours the `ignore` option.

    Subclasses set `name` and `meta` and implement `listeners`; files matching
    an ignore pattern get no listeners at all.
    """

    name: ClassVar[str] = ""
    meta: ClassVar[RuleMeta]

    def create(self, context: RuleContext) -> Listeners:
        if self.is_ignored(context):
            return {}
        return self.listeners(context)

    def is_ignored(self, context: RuleContext) -> bool:
        patterns = context.option("ignore", []) or []
        return PathFilter(patterns, root=context.cwd).matches(context.filename)

    def listeners(self, context: RuleContext) -> Listeners:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
