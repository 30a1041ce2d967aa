"""
plan_rename.py - Shift Plan Generation Module

Responsibilities:
- Decide, per file, whether it is renamed or skipped (threshold,
  negative target, out-of-range target, unchanged name)
- Order the decisions so the batch is collision-free
- Output ShiftPlan
"""

import logging
from typing import List

from .models_fs import (
    FileDecision, MatchedFile, RenameOp, ShiftPlan, SkipReason, MAX_NUMBER
)
from .sort_rules import order_for_offset

logger = logging.getLogger(__name__)


def decide(file: MatchedFile, offset: int, threshold: int) -> FileDecision:
    """
    Decide what happens to a single file

    Args:
        file: Matched file
        offset: Offset added to the number
        threshold: Minimum original number to rename

    Returns:
        Rename decision, or skip decision with a reason
    """
    if file.number < threshold:
        return FileDecision(
            file=file,
            skip_reason=SkipReason.BELOW_THRESHOLD,
            message=(f"Original number ({file.number}) is less than "
                     f"'b' ({threshold})."),
        )

    new_number = file.number + offset

    if new_number < 0:
        return FileDecision(
            file=file,
            skip_reason=SkipReason.NEGATIVE_TARGET,
            message=(f"New number ({new_number}) would be negative. "
                     f"New filenames must be non-negative."),
        )

    if new_number > MAX_NUMBER:
        return FileDecision(
            file=file,
            skip_reason=SkipReason.TARGET_OUT_OF_RANGE,
            message=f"New number ({new_number}) is larger than {MAX_NUMBER}.",
        )

    new_name = file.target_name(new_number)
    if new_name == file.name:
        return FileDecision(
            file=file,
            skip_reason=SkipReason.SAME_NAME,
            message="New filename is identical to original.",
        )

    return FileDecision(
        file=file,
        op=RenameOp(src=file.path, dst=file.path.parent / new_name),
    )


def plan_shift_rename(
    files: List[MatchedFile],
    offset: int,
    threshold: int
) -> ShiftPlan:
    """
    Generate shift rename plan

    Args:
        files: Matched files (any order)
        offset: Offset added to every number
        threshold: Minimum original number to rename

    Returns:
        Plan with one decision per file, in collision-free order
    """
    plan = ShiftPlan(offset=offset, threshold=threshold)

    for f in order_for_offset(files, offset):
        plan.add_decision(decide(f, offset, threshold))

    logger.debug(
        "Planned %d renames, %d skips (offset=%d, threshold=%d)",
        plan.total_count, len(plan.skipped), offset, threshold,
    )
    return plan
