"""
models_fs.py - Core Data Structure Definitions

Contains:
- MatchedFile: File named NUMBER.EXTENSION
- RenameOp: Single rename operation
- SkipReason: Why a matched file is left untouched
- FileDecision: What happens to one matched file
- ShiftPlan: Ordered decisions for a whole batch
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

# Largest numeric prefix accepted (signed 32-bit range)
MAX_NUMBER = 2**31 - 1


class SkipReason(Enum):
    """Skip reason enumeration"""
    BELOW_THRESHOLD = "below_threshold"          # Original number < b
    NEGATIVE_TARGET = "negative_target"          # number + a < 0
    TARGET_OUT_OF_RANGE = "target_out_of_range"  # number + a > MAX_NUMBER
    SAME_NAME = "same_name"                      # New name equals old name


@dataclass(frozen=True)
class MatchedFile:
    """File whose name matches NUMBER.EXTENSION"""
    number: int                     # Parsed numeric prefix
    path: Path                      # Original full path
    extension: str                  # Everything after the first dot

    @property
    def name(self) -> str:
        """Original filename"""
        return self.path.name

    def target_name(self, new_number: int) -> str:
        """Filename carrying new_number and the same extension"""
        return f"{new_number}.{self.extension}"


@dataclass(frozen=True)
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path


@dataclass(frozen=True)
class FileDecision:
    """Decision for one matched file: either a rename or a skip"""
    file: MatchedFile
    op: Optional[RenameOp] = None
    skip_reason: Optional[SkipReason] = None
    message: str = ""

    @property
    def is_skip(self) -> bool:
        return self.skip_reason is not None


@dataclass
class ShiftPlan:
    """Batch shift plan, decisions kept in execution order"""
    offset: int
    threshold: int
    decisions: List[FileDecision] = field(default_factory=list)

    @property
    def ops(self) -> List[RenameOp]:
        """Rename operations in execution order"""
        return [d.op for d in self.decisions if d.op is not None]

    @property
    def skipped(self) -> List[FileDecision]:
        """Skipped decisions in execution order"""
        return [d for d in self.decisions if d.is_skip]

    @property
    def total_count(self) -> int:
        return len(self.ops)

    @property
    def descending(self) -> bool:
        """Whether files are processed from highest number to lowest"""
        return self.offset >= 0

    def add_decision(self, decision: FileDecision) -> None:
        """Add decision"""
        self.decisions.append(decision)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Shift Plan Summary:",
            f"  - Offset: {self.offset}",
            f"  - Threshold: {self.threshold}",
            f"  - Matched files: {len(self.decisions)}",
            f"  - Rename operations: {self.total_count}",
            f"  - Skipped: {len(self.skipped)}",
        ]
        return "\n".join(lines)
