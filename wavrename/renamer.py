from __future__ import annotations

import os
from typing import Callable, Iterable, List, Tuple

from wavrename.captions import strip_marker
from wavrename.config import MAX_NAME_CHARS, WAV_MARKER
from wavrename.logging_utils import get_logger
from wavrename.types import CaptionMap, DirectoryEntry, RenameOutcome, RenamePlan, RenameRecord

log = get_logger(__name__)

Echo = Callable[[str], None]


def sort_key(entry: DirectoryEntry) -> Tuple[int, bytes]:
    """Shorter names first, equal lengths in lexicographic order.

    Length is measured in UTF-8 bytes, so a kana name sorts after an ASCII
    name with the same number of characters.
    """
    encoded = entry.name.encode("utf-8")
    return (len(encoded), encoded)


def sort_entries(entries: Iterable[DirectoryEntry]) -> List[DirectoryEntry]:
    return sorted(entries, key=sort_key)


def audio_key(file_name: str) -> str:
    return strip_marker(file_name, WAV_MARKER)


def compose_name(sequence: int, caption: str) -> str:
    """Return "{sequence}_{caption}" cut to MAX_NAME_CHARS characters, plus ".wav"."""
    stem = f"{sequence}_{caption}"
    if len(stem) > MAX_NAME_CHARS:
        stem = stem[:MAX_NAME_CHARS]
    return stem + WAV_MARKER


def plan_renames(entries: Iterable[DirectoryEntry], captions: CaptionMap) -> List[RenamePlan]:
    """Assign sequence numbers and new names in the given order.

    Only entries with a caption consume a number. No filesystem access.
    """
    plans: List[RenamePlan] = []
    sequence = 0
    for entry in entries:
        key = audio_key(entry.name)
        caption = captions.get(key)
        if caption is None:
            plans.append(RenamePlan(entry=entry, key=key))
            continue
        plans.append(RenamePlan(entry=entry, key=key, sequence=sequence,
                                new_name=compose_name(sequence, caption)))
        sequence += 1
    return plans


def _rename(source: str, target: str) -> None:
    # os.rename silently replaces an existing target on POSIX
    if os.path.lexists(target) and not os.path.samefile(source, target):
        raise FileExistsError(f"target already exists: {target}")
    os.rename(source, target)


def apply_renames(directory: str, plans: Iterable[RenamePlan], echo: Echo = print) -> List[RenameRecord]:
    """Rename each planned file inside ``directory``, reporting progress through ``echo``.

    Failures are recorded and processing continues; nothing is rolled back.
    """
    records: List[RenameRecord] = []
    for plan in plans:
        echo(plan.entry.name)
        if plan.new_name is None:
            echo(f"{plan.key}に対応するテキストファイルがありませんでした。")
            records.append(RenameRecord(source=plan.entry.path, new_name=None,
                                        outcome=RenameOutcome.SKIPPED_NO_CAPTION))
            continue

        target = os.path.join(directory, plan.new_name)
        try:
            _rename(plan.entry.path, target)
        except (OSError, ValueError) as e:
            # ValueError: the caption put a NUL byte into the target name
            log.debug("rename failed", extra={"file": plan.entry.path, "target": target, "error": str(e)})
            records.append(RenameRecord(source=plan.entry.path, new_name=plan.new_name,
                                        outcome=RenameOutcome.SKIPPED_RENAME_FAILED,
                                        sequence=plan.sequence, error=str(e)))
            continue
        log.debug("renamed", extra={"file": plan.entry.path, "target": target})
        records.append(RenameRecord(source=plan.entry.path, new_name=plan.new_name,
                                    outcome=RenameOutcome.RENAMED, sequence=plan.sequence))
    return records


def rename_wav_files(directory: str, entries: Iterable[DirectoryEntry], captions: CaptionMap,
                     echo: Echo = print) -> List[RenameRecord]:
    """Sort the wav entries, match them against captions and rename them."""
    plans = plan_renames(sort_entries(entries), captions)
    records = apply_renames(directory, plans, echo=echo)
    log.info("rename finished", extra={
        "renamed": sum(1 for r in records if r.renamed),
        "total": len(records),
    })
    return records
