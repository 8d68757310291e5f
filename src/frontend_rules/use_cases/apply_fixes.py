"""Use Case: Apply Fixes - rewrite source text using the fixes rules attached."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from frontend_rules.domain.rules import Fix, Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixOutcome:
    """Rewritten text and which violations were fixed in it."""

    text: str
    applied: tuple[Violation, ...]
    skipped: tuple[Violation, ...]

    @property
    def applied_count(self) -> int:
        return len(self.applied)


class ApplyFixesUseCase:
    """
    Apply non-overlapping fixes in one pass.

    Fixes are sorted by range; a fix that overlaps one already accepted is
    skipped and left for the next run, as ESLint does.
    """

    def execute(self, text: str, violations: Iterable[Violation]) -> FixOutcome:
        candidates = sorted(
            (v for v in violations if v.fix is not None),
            key=lambda v: v.fix.range,  # type: ignore[union-attr]
        )
        applied: list[Violation] = []
        skipped: list[Violation] = []
        last_end = -1
        for violation in candidates:
            fix: Fix = violation.fix  # type: ignore[assignment]
            start, end = fix.range
            if start < last_end or start < 0 or end > len(text) or start > end:
                skipped.append(violation)
                continue
            applied.append(violation)
            last_end = end

        pieces: list[str] = []
        cursor = 0
        for violation in applied:
            start, end = violation.fix.range  # type: ignore[union-attr]
            pieces.append(text[cursor:start])
            pieces.append(violation.fix.text)  # type: ignore[union-attr]
            cursor = end
        pieces.append(text[cursor:])

        if skipped:
            logger.debug("Skipped %d overlapping fix(es)", len(skipped))
        return FixOutcome(text="".join(pieces), applied=tuple(applied), skipped=tuple(skipped))
