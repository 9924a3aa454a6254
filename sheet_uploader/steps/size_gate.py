from __future__ import annotations

import os
from pathlib import Path

from ..config import MIN_UPLOAD_BYTES


def check_file_size(
    path: str | Path, min_bytes: int = MIN_UPLOAD_BYTES
) -> tuple[bool, OSError | None]:
    """Return whether ``path`` is large enough to be worth uploading.

    Broken exports tend to leave near-empty files behind, so anything not
    strictly larger than ``min_bytes`` is rejected. When the file cannot be
    opened or stat'd the ``OSError`` is returned instead of raised so callers
    can tell a missing file from a small one.
    """
    try:
        with open(path, "rb") as fh:
            size = os.fstat(fh.fileno()).st_size
    except OSError as exc:
        return False, exc
    return size > min_bytes, None


__all__ = ["check_file_size"]
