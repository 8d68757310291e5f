"""Source text and comment access for one linted file."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from frontend_rules.domain.nodes import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Comment:
    """A `Line` (`// ...`) or `Block` (`/* ... */`) comment; value excludes the delimiters."""

    type: str
    value: str
    start: int
    end: int

    @classmethod
    def from_estree(cls, data: Mapping[str, Any]) -> "Comment | None":
        """Build from a serialized comment; None if it carries no usable range."""
        node_range = data.get("range")
        if isinstance(node_range, (list, tuple)) and len(node_range) == 2:
            start, end = int(node_range[0]), int(node_range[1])
        elif isinstance(data.get("start"), int) and isinstance(data.get("end"), int):
            start, end = int(data["start"]), int(data["end"])
        else:
            return None
        return cls(
            type=str(data.get("type", "")),
            value=str(data.get("value", "")),
            start=start,
            end=end,
        )

    @property
    def is_doc_block(self) -> bool:
        """True for `/** ... */` style comments."""
        return self.type == "Block" and self.value.startswith("*")


class SourceCode:
    """Text, lines and comments of a file, plus the Program node they belong to."""

    def __init__(
        self,
        text: str,
        ast: Node,
        comments: Sequence[Comment] | None = None,
    ) -> None:
        self.text = text
        self.ast = ast
        self.lines = text.splitlines()
        if comments is None:
            comments = SourceCode.comments_from_program(ast)
        self.comments: tuple[Comment, ...] = tuple(sorted(comments, key=lambda c: c.start))

    @staticmethod
    def comments_from_program(program: Node) -> list[Comment]:
        raw = program.get("comments") or []
        comments: list[Comment] = []
        for item in raw:
            if not isinstance(item, Mapping):
                continue
            comment = Comment.from_estree(item)
            if comment is not None:
                comments.append(comment)
        return comments

    def get_text(self, node: Node | None = None) -> str:
        """Source text of node, or the whole file."""
        if node is None:
            return self.text
        if node.start is None or node.end is None:
            return ""
        return self.text[node.start:node.end]

    def get_comments_before(self, node: Node) -> list[Comment]:
        """
        Comments directly before node, nearest first.

        Only whitespace may separate consecutive comments and the node; the
        first non-whitespace gap (another statement, a token) ends the run.
        """
        cursor = node.start
        if cursor is None:
            return []
        if len(self.text) < cursor:
            logger.debug("Source text does not cover offset %s; skipping comment lookup", cursor)
            return []
        found: list[Comment] = []
        for comment in reversed(self.comments):
            if comment.end > cursor:
                continue
            if self.text[comment.end:cursor].strip():
                break
            found.append(comment)
            cursor = comment.start
        return found

    def location_of(self, offset: int) -> tuple[int, int]:
        """Convert a character offset to (1-based line, 0-based column)."""
        offset = max(0, min(offset, len(self.text)))
        line = self.text.count("\n", 0, offset) + 1
        column = offset - (self.text.rfind("\n", 0, offset) + 1)
        return line, column

    def node_location(self, node: Node) -> tuple[int, int]:
        if node.line is not None and node.column is not None:
            return node.line, node.column
        if node.start is not None:
            return self.location_of(node.start)
        return 1, 0
