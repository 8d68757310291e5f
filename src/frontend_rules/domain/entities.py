from dataclasses import dataclass, field

from frontend_rules.domain.nodes import Node
from frontend_rules.domain.rules import Severity, Violation
from frontend_rules.domain.source_code import SourceCode


@dataclass(frozen=True)
class ParsedFile:
    """A file's syntax tree and text as produced by the external parser."""

    filename: str
    source_code: SourceCode
    # On-disk file the text was read from; fixes are written here.
    source_path: str | None = None

    @property
    def program(self) -> Node:
        return self.source_code.ast


@dataclass(frozen=True)
class LintResult:
    """Violations found in one file, plus the fixed text when fixes were applied."""

    filename: str
    violations: tuple[Violation, ...] = field(default_factory=tuple)
    fixed_source: str | None = None
    applied_fixes: int = 0

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity is Severity.WARN)

    @property
    def fixable_count(self) -> int:
        return sum(1 for v in self.violations if v.fixable)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def to_dict(self) -> dict[str, object]:
        return {
            "file": self.filename,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "fixable_count": self.fixable_count,
            "applied_fixes": self.applied_fixes,
            "violations": [v.to_dict() for v in self.violations],
        }
