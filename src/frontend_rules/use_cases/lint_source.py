"""Use Case: Lint Source - run enabled rules over one parsed file."""

import logging
from collections import defaultdict

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.domain.entities import LintResult, ParsedFile
from frontend_rules.domain.nodes import Node
from frontend_rules.domain.rules import Listener, RuleContext, Violation

logger = logging.getLogger(__name__)

EXIT_SUFFIX = ":exit"


class LintSourceUseCase:
    """
    Reference host for the rule contract.

    Every enabled rule gets a fresh RuleContext per file. The tree is walked
    depth-first in visitor-key order; for each node the `Type` listeners fire
    on the way down and the `Type:exit` listeners on the way up, in rule
    registration order.
    """

    def __init__(self, configuration: LintConfiguration) -> None:
        self.configuration = configuration

    def execute(self, parsed_file: ParsedFile, cwd: str | None = None) -> LintResult:
        violations: list[Violation] = []
        enter: dict[str, list[Listener]] = defaultdict(list)
        leave: dict[str, list[Listener]] = defaultdict(list)

        for rule, setting in self.configuration.enabled_rules():
            context = RuleContext(
                rule_id=rule.name,
                meta=rule.meta,
                filename=parsed_file.filename,
                source_code=parsed_file.source_code,
                options=setting.options,
                cwd=cwd,
                severity=setting.severity,
                sink=violations,
            )
            listeners = rule.create(context)
            logger.debug("%s: %d listener(s) for %s", rule.name, len(listeners), parsed_file.filename)
            for selector, callback in listeners.items():
                if selector.endswith(EXIT_SUFFIX):
                    leave[selector[: -len(EXIT_SUFFIX)]].append(callback)
                else:
                    enter[selector].append(callback)

        if enter or leave:
            self._traverse(parsed_file.program, enter, leave)

        ordered = sorted(violations, key=lambda v: (v.line, v.column))
        return LintResult(filename=parsed_file.filename, violations=tuple(ordered))

    def _traverse(
        self,
        program: Node,
        enter: dict[str, list[Listener]],
        leave: dict[str, list[Listener]],
    ) -> None:
        stack: list[tuple[Node, bool]] = [(program, False)]
        while stack:
            node, exiting = stack.pop()
            if exiting:
                for callback in leave.get(node.type, ()):
                    callback(node)
                continue
            for callback in enter.get(node.type, ()):
                callback(node)
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(list(node.child_nodes())))
