"""Atomic JSON file writes shared by the JSON stores."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


def write_json_atomically(file_path: Path, data) -> None:
    """Replace *file_path* with *data* serialised as JSON.

    The data goes to a temporary file in the same directory, is flushed
    to disk and then renamed over the target with ``os.replace``.  A
    reader sees the old file or the new one, never a partial write.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{file_path.name}.", suffix=".tmp", dir=file_path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(data, indent=2) + "\n")
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, file_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
