from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from frontend_rules.domain.entities import LintResult, ParsedFile


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def exists(self, path: str) -> bool:
        ...

    def glob_ast_files(self, path: str) -> list[str]:
        """Get all serialized AST files (`*.json`) in path (recursive if directory)."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        ...


class AstSourceProtocol(Protocol):
    """Protocol for loading a parser's ESTree output into a ParsedFile."""

    def load(self, path: str) -> "ParsedFile":
        """Raise AstLoadError when the file is not a usable Program."""
        ...


class ViolationReporterProtocol(Protocol):
    """Protocol for reporting lint results to the user."""

    def report(self, results: list["LintResult"]) -> None:
        ...
