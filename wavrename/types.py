from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional


CaptionMap = Dict[str, str]


@dataclass(frozen=True)
class DirectoryEntry:
    path: str
    name: str


class ScanStatus(enum.Enum):
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    FOUND = "found"


@dataclass
class ScanResult:
    status: ScanStatus
    entries: List[DirectoryEntry] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is ScanStatus.FOUND


class RenameOutcome(enum.Enum):
    RENAMED = "renamed"
    SKIPPED_NO_CAPTION = "skipped_no_caption"
    SKIPPED_RENAME_FAILED = "skipped_rename_failed"


@dataclass(frozen=True)
class RenamePlan:
    """One audio file and the name it should get; new_name is None when no caption matched."""

    entry: DirectoryEntry
    key: str
    sequence: Optional[int] = None
    new_name: Optional[str] = None


@dataclass
class RenameRecord:
    source: str
    new_name: Optional[str]
    outcome: RenameOutcome
    sequence: Optional[int] = None
    error: Optional[str] = None

    @property
    def renamed(self) -> bool:
        return self.outcome is RenameOutcome.RENAMED


class RunStatus(enum.Enum):
    NO_DIRECTORY = "no_directory"
    TXT_NOT_FOUND = "txt_not_found"
    WAV_NOT_FOUND = "wav_not_found"
    COMPLETED = "completed"


@dataclass
class RunReport:
    status: RunStatus
    records: List[RenameRecord] = field(default_factory=list)

    def count(self, outcome: RenameOutcome) -> int:
        return sum(1 for r in self.records if r.outcome is outcome)
