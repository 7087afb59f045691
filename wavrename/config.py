from __future__ import annotations

TXT_MARKER = ".txt"
WAV_MARKER = ".wav"

# Composed "{sequence}_{caption}" is cut to this many characters before WAV_MARKER is appended
MAX_NAME_CHARS = 20

# Windows-31J, the superset most Japanese tools actually write as "Shift_JIS"
CAPTION_ENCODING = "cp932"

# cp932 maps the unassigned single bytes 0xA0 and 0xFD-0xFF to these private-use code points
CP932_UNASSIGNED = "\uf8f0\uf8f1\uf8f2\uf8f3"
