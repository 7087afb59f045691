from __future__ import annotations

import codecs
import os
from typing import Iterable, Tuple

from wavrename.config import CAPTION_ENCODING, CP932_UNASSIGNED, TXT_MARKER
from wavrename.errors import CaptionReadError
from wavrename.logging_utils import get_logger
from wavrename.types import CaptionMap, DirectoryEntry

log = get_logger(__name__)

_BOMS: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)

_UNASSIGNED_TO_REPLACEMENT = {ord(c): "\ufffd" for c in CP932_UNASSIGNED}


def strip_marker(file_name: str, marker: str) -> str:
    """Remove ``marker`` from the end of ``file_name`` if it is a true suffix."""
    if marker and file_name.endswith(marker):
        return file_name[: -len(marker)]
    return file_name


def caption_key(file_name: str) -> str:
    return strip_marker(file_name, TXT_MARKER)


def decode_caption(data: bytes) -> str:
    """Decode caption bytes written by Japanese TTS tools.

    Shift_JIS (Windows-31J) unless a byte-order mark says otherwise; the BOM
    itself is dropped. Undecodable sequences become U+FFFD.
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return data[len(bom):].decode(encoding, errors="replace")
    return data.decode(CAPTION_ENCODING, errors="replace").translate(_UNASSIGNED_TO_REPLACEMENT)


def read_caption(path: str) -> str:
    """Read and decode one caption file or raise CaptionReadError."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise CaptionReadError(f"Failed to read caption {path!r}: {e}") from e
    return decode_caption(data)


def load_captions(entries: Iterable[DirectoryEntry], delete_source: bool = True) -> CaptionMap:
    """Build the base name -> caption mapping, deleting each txt after reading it.

    Files that cannot be read are left alone and get no mapping entry. When two
    entries share a base name the later one wins. Deletion is best effort: a
    failure leaves the txt on disk and the caption in the mapping.
    """
    captions: CaptionMap = {}
    for entry in entries:
        try:
            text = read_caption(entry.path)
        except CaptionReadError as e:
            log.debug("caption unreadable; skip", extra={"file": entry.path, "error": str(e)})
            continue

        key = caption_key(entry.name)
        if key in captions:
            log.debug("duplicate caption key; overwrite", extra={"key": key, "file": entry.path})
        captions[key] = text

        if delete_source:
            try:
                os.remove(entry.path)
            except OSError as e:
                log.debug("caption delete failed", extra={"file": entry.path, "error": str(e)})

    log.info("captions loaded", extra={"count": len(captions)})
    return captions
