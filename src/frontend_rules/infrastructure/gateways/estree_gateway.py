"""ESTree Gateway - load a parser's serialized syntax tree from disk."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frontend_rules.domain.entities import ParsedFile
from frontend_rules.domain.errors import AstLoadError, NotAnAstError
from frontend_rules.domain.nodes import Node
from frontend_rules.domain.protocols import AstSourceProtocol, FileSystemProtocol
from frontend_rules.domain.source_code import SourceCode

logger = logging.getLogger(__name__)


class EstreeGateway(AstSourceProtocol):
    """
    Reads ESTree JSON as written by typescript-eslint or espree.

    Two layouts are accepted:

    * an envelope `{"filePath": ..., "source": ..., "ast": {...Program}}`;
      `filePath` is resolved against the JSON file's directory and `source`
      may be omitted when that file exists;
    * a bare `Program` saved next to its source as `<source>.json`
      (`Button.tsx.json` for `Button.tsx`).
    """

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self.filesystem = filesystem

    def load(self, path: str) -> ParsedFile:
        data = self._read_json(path)
        if data.get("type") == "Program":
            if not path.endswith(".json"):
                raise AstLoadError(path, "a bare Program must be saved as <source>.json")
            source_path = path[: -len(".json")]
            return self._build(path, data, filename=source_path, text=None, source_path=source_path)
        if "ast" not in data:
            raise NotAnAstError(path, "expected a Program node or an envelope with an 'ast' Program")
        ast = data.get("ast")
        if not isinstance(ast, Mapping) or ast.get("type") != "Program":
            raise AstLoadError(path, "expected a Program node or an envelope with an 'ast' Program")
        file_path = data.get("filePath")
        if not isinstance(file_path, str) or not file_path:
            raise AstLoadError(path, "envelope is missing 'filePath'")
        text = data.get("source")
        if text is not None and not isinstance(text, str):
            raise AstLoadError(path, "'source' must be a string")
        source_path = self._resolve_source(path, file_path)
        return self._build(path, ast, filename=file_path, text=text, source_path=source_path)

    def _read_json(self, path: str) -> Mapping[str, Any]:
        try:
            data = json.loads(self.filesystem.read_text(path))
        except (OSError, UnicodeDecodeError) as exc:
            raise AstLoadError(path, str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise AstLoadError(path, f"invalid JSON: {exc}") from exc
        except RecursionError as exc:
            raise AstLoadError(path, "JSON nesting is too deep to decode") from exc
        if not isinstance(data, Mapping):
            raise NotAnAstError(path, "top-level JSON value must be an object")
        return data

    @staticmethod
    def _resolve_source(ast_path: str, file_path: str) -> str:
        candidate = Path(file_path)
        if not candidate.is_absolute():
            candidate = Path(ast_path).parent / candidate
        return str(candidate)

    def _build(
        self,
        ast_path: str,
        program: Mapping[str, Any],
        *,
        filename: str,
        text: str | None,
        source_path: str,
    ) -> ParsedFile:
        on_disk = self.filesystem.exists(source_path)
        if text is None:
            if on_disk:
                try:
                    text = self.filesystem.read_text(source_path)
                except (OSError, UnicodeDecodeError) as exc:
                    raise AstLoadError(ast_path, f"cannot read source {source_path}: {exc}") from exc
            else:
                logger.warning(
                    "%s: source %s not found; comment and text lookups will be empty",
                    ast_path,
                    source_path,
                )
                text = ""
        root = Node.from_estree(program)
        return ParsedFile(
            filename=filename,
            source_code=SourceCode(text, root),
            source_path=source_path if on_disk else None,
        )
