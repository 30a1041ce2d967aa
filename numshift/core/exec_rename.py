"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply a ShiftPlan strictly in order, one rename attempt per operation
- Report one outcome per matched file (skipped / renamed / failed)
- A failed rename never stops the batch
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .errors import RenameFailure
from .models_fs import FileDecision, RenameOp, ShiftPlan
from .safety_checks import check_rename_op

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Per-file execution outcome"""
    SKIPPED = "skipped"
    RENAMED = "renamed"
    FAILED = "failed"


ProgressCallback = Callable[[int, int, Outcome, str], None]


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)
    skipped: List[FileDecision] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Renamed: {self.success_count}",
            f"  - Failed: {self.failed_count}",
            f"  - Skipped: {self.skipped_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for op, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {op.src.name} -> {op.dst.name}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def rename_one(op: RenameOp) -> None:
    """
    Rename a single file without overwriting anything

    Raises:
        RenameFailure: Pre-check rejected the operation or the OS refused it
    """
    ok, error = check_rename_op(op.src, op.dst)
    if not ok:
        raise RenameFailure(op.src, op.dst, error)

    try:
        os.rename(op.src, op.dst)
    except OSError as e:
        raise RenameFailure(op.src, op.dst, str(e)) from e


def execute_shift(
    plan: ShiftPlan,
    progress_callback: Optional[ProgressCallback] = None
) -> RenameResult:
    """
    Execute shift plan

    Args:
        plan: Shift plan (decisions already in collision-free order)
        progress_callback: Progress callback (current, total, outcome, message)

    Returns:
        Execution result
    """
    result = RenameResult()
    total = len(plan.decisions)

    for i, decision in enumerate(plan.decisions, start=1):
        name = decision.file.name

        if decision.is_skip:
            result.skipped.append(decision)
            if progress_callback:
                progress_callback(i, total, Outcome.SKIPPED,
                                  f"Skipping '{name}': {decision.message}")
            continue

        op = decision.op
        try:
            rename_one(op)
        except RenameFailure as e:
            logger.debug("Rename failed: %s", e)
            result.failed.append((op, e.reason))
            if progress_callback:
                progress_callback(i, total, Outcome.FAILED, str(e))
            continue

        result.success.append(op)
        if progress_callback:
            progress_callback(i, total, Outcome.RENAMED,
                              f"Renamed '{op.src.name}' to '{op.dst.name}'")

    return result
