"""Unit tests for CheckFilesUseCase (use_cases/check_files.py)."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.domain.errors import AstLoadError, NotAnAstError
from frontend_rules.use_cases.check_files import CheckFilesUseCase
from tests.unit.estree_builders import (
    expression_stmt,
    jsx,
    jsx_attr,
    jsx_container,
    literal,
    parsed,
    place,
    program,
)

TEXT = "<Input name={'email'} />;\n"


def _curly_file(source_path: str | None = "src/input.tsx") -> object:
    container = place(jsx_container(literal("email", raw="'email'")), TEXT, "{'email'}")
    tree = program(expression_stmt(jsx("Input", attributes=[jsx_attr("name", container)])))
    return replace(parsed(tree, filename="src/input.tsx", text=TEXT), source_path=source_path)


def _use_case(ast_source: MagicMock, filesystem: MagicMock) -> CheckFilesUseCase:
    configuration = LintConfiguration({"extends": [], "rules": {"no-unnecessary-curly-in-props": "error"}})
    return CheckFilesUseCase(configuration=configuration, ast_source=ast_source, filesystem=filesystem)


class TestCheckFilesUseCase:
    def test_collect_files_expands_directories(self) -> None:
        filesystem = MagicMock()
        filesystem.is_directory.side_effect = lambda path: path == "ast"
        filesystem.glob_ast_files.return_value = ["ast/b.json", "ast/a.json"]
        use_case = _use_case(MagicMock(), filesystem)
        assert use_case.collect_files(["ast", "one.json", "ast/a.json"]) == ["ast/a.json", "ast/b.json", "one.json"]

    def test_reports_without_fixing(self) -> None:
        ast_source = MagicMock()
        ast_source.load.return_value = _curly_file()
        filesystem = MagicMock()
        filesystem.is_directory.return_value = False
        results = _use_case(ast_source, filesystem).execute(["input.tsx.json"])
        assert len(results) == 1
        assert results[0].fixable_count == 1
        assert results[0].fixed_source is None
        filesystem.write_text.assert_not_called()

    def test_fix_writes_source_and_drops_fixed_violations(self) -> None:
        ast_source = MagicMock()
        ast_source.load.return_value = _curly_file()
        filesystem = MagicMock()
        filesystem.is_directory.return_value = False
        results = _use_case(ast_source, filesystem).execute(["input.tsx.json"], fix=True)
        filesystem.write_text.assert_called_once_with("src/input.tsx", "<Input name='email' />;\n")
        assert results[0].violations == ()
        assert results[0].applied_fixes == 1
        assert results[0].fixed_source == "<Input name='email' />;\n"

    def test_fix_without_source_file_keeps_violations(self) -> None:
        ast_source = MagicMock()
        ast_source.load.return_value = _curly_file(source_path=None)
        filesystem = MagicMock()
        filesystem.is_directory.return_value = False
        results = _use_case(ast_source, filesystem).execute(["input.tsx.json"], fix=True)
        filesystem.write_text.assert_not_called()
        assert len(results[0].violations) == 1

    def test_load_errors_propagate(self) -> None:
        ast_source = MagicMock()
        ast_source.load.side_effect = AstLoadError("bad.json", "invalid JSON")
        filesystem = MagicMock()
        filesystem.is_directory.return_value = False
        with pytest.raises(AstLoadError):
            _use_case(ast_source, filesystem).execute(["bad.json"])

    def test_non_ast_json_in_directory_is_skipped(self) -> None:
        def load(path: str) -> object:
            if path == "web/package.json":
                raise NotAnAstError(path, "expected a Program node")
            return _curly_file()

        ast_source = MagicMock()
        ast_source.load.side_effect = load
        filesystem = MagicMock()
        filesystem.is_directory.side_effect = lambda path: path == "web"
        filesystem.glob_ast_files.return_value = ["web/package.json", "web/input.tsx.json"]
        results = _use_case(ast_source, filesystem).execute(["web"])
        assert [r.filename for r in results] == ["src/input.tsx"]

    def test_non_ast_json_named_explicitly_is_an_error(self) -> None:
        ast_source = MagicMock()
        ast_source.load.side_effect = NotAnAstError("package.json", "expected a Program node")
        filesystem = MagicMock()
        filesystem.is_directory.return_value = False
        with pytest.raises(NotAnAstError):
            _use_case(ast_source, filesystem).execute(["package.json"])
