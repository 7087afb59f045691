from __future__ import annotations

class RenamerError(Exception):
    """Base error for the wav caption renamer."""


class DirectoryScanError(RenamerError, OSError):
    """Raised when the target directory cannot be opened for listing."""


class CaptionReadError(RenamerError, OSError):
    """Raised when a caption txt file cannot be read."""
