from __future__ import annotations

import os
from typing import Iterator, List

from wavrename.errors import DirectoryScanError
from wavrename.logging_utils import get_logger
from wavrename.types import DirectoryEntry, ScanResult, ScanStatus

log = get_logger(__name__)


def _is_utf8_name(name: str) -> bool:
    # os.scandir smuggles undecodable bytes in as lone surrogates
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _iter_files(path: str) -> Iterator[os.DirEntry]:
    try:
        it = os.scandir(path)
    except OSError as e:
        raise DirectoryScanError(f"cannot open directory {path!r}: {e}") from e
    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                return
            except OSError as e:
                log.debug("listing interrupted", extra={"path": path, "error": str(e)})
                return
            try:
                if not entry.is_file():
                    continue
            except OSError:
                log.debug("unreadable entry; skip", extra={"entry": entry.name})
                continue
            yield entry


def scan_directory(path: str, marker: str) -> ScanResult:
    """List the files directly inside ``path`` whose name contains ``marker``.

    ``marker`` is matched as a plain substring anywhere in the name, so
    ".wav" also selects "take.wav.bak". The returned entries are unordered.
    """
    entries: List[DirectoryEntry] = []
    try:
        for entry in _iter_files(path):
            if not _is_utf8_name(entry.name):
                log.debug("non UTF-8 file name; skip", extra={"entry": entry.name})
                continue
            if marker in entry.name:
                entries.append(DirectoryEntry(path=entry.path, name=entry.name))
    except DirectoryScanError as e:
        log.info("directory scan failed", extra={"path": path, "error": str(e)})
        return ScanResult(ScanStatus.NOT_FOUND)

    if not entries:
        log.info("no matching files", extra={"path": path, "marker": marker})
        return ScanResult(ScanStatus.EMPTY)
    log.debug("scan done", extra={"path": path, "marker": marker, "count": len(entries)})
    return ScanResult(ScanStatus.FOUND, entries)
