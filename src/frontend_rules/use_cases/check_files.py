"""Use Case: Check Files - load, lint and optionally fix a set of AST files."""

import logging
from dataclasses import replace

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.domain.entities import LintResult
from frontend_rules.domain.errors import NotAnAstError
from frontend_rules.domain.protocols import AstSourceProtocol, FileSystemProtocol
from frontend_rules.use_cases.apply_fixes import ApplyFixesUseCase
from frontend_rules.use_cases.lint_source import LintSourceUseCase

logger = logging.getLogger(__name__)


class CheckFilesUseCase:
    """Orchestrate linting of every AST file under the given paths."""

    def __init__(
        self,
        configuration: LintConfiguration,
        ast_source: AstSourceProtocol,
        filesystem: FileSystemProtocol,
    ) -> None:
        self.configuration = configuration
        self.ast_source = ast_source
        self.filesystem = filesystem
        self.linter = LintSourceUseCase(configuration)
        self.fixer = ApplyFixesUseCase()

    def collect_files(self, paths: list[str]) -> list[str]:
        """Expand directories to their AST files; keep order and drop duplicates."""
        return [path for path, _discovered in self._expand(paths)]

    def _expand(self, paths: list[str]) -> list[tuple[str, bool]]:
        seen: set[str] = set()
        files: list[tuple[str, bool]] = []
        for path in paths:
            discovered = self.filesystem.is_directory(path)
            candidates = sorted(self.filesystem.glob_ast_files(path)) if discovered else [path]
            for candidate in candidates:
                if candidate not in seen:
                    seen.add(candidate)
                    files.append((candidate, discovered))
        return files

    def execute(
        self, paths: list[str], fix: bool = False, cwd: str | None = None
    ) -> list[LintResult]:
        """
        Lint each file; with fix=True, rewrite its source and report what is left.

        JSON found while expanding a directory that is not a syntax tree
        (package.json, tsconfig.json) is skipped. Raises AstLoadError for the
        first file that cannot be loaded.
        """
        results: list[LintResult] = []
        for path, discovered in self._expand(paths):
            try:
                parsed = self.ast_source.load(path)
            except NotAnAstError:
                if not discovered:
                    raise
                logger.debug("Skipping %s: not a serialized syntax tree", path)
                continue
            result = self.linter.execute(parsed, cwd=cwd)
            if fix and result.fixable_count:
                result = self._fix(result, parsed.source_code.text, parsed.source_path)
            results.append(result)
        return results

    def _fix(self, result: LintResult, text: str, source_path: str | None) -> LintResult:
        if source_path is None:
            logger.warning("%s: no source file to write fixes to", result.filename)
            return result
        outcome = self.fixer.execute(text, result.violations)
        if not outcome.applied_count:
            return result
        self.filesystem.write_text(source_path, outcome.text)
        logger.info("%s: applied %d fix(es)", source_path, outcome.applied_count)
        applied = set(map(id, outcome.applied))
        remaining = tuple(v for v in result.violations if id(v) not in applied)
        return replace(
            result,
            violations=remaining,
            fixed_source=outcome.text,
            applied_fixes=outcome.applied_count,
        )
