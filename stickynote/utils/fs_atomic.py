from __future__ import annotations

import json
import os
import uuid
from pathlib import Path
from typing import Any, Union

Pathish = Union[str, Path]

__all__ = ["fsync_dir", "atomic_write_text", "atomic_write_json"]


def fsync_dir(dir_path: Pathish) -> None:
    """
    Fsync a directory so a rename inside it is durable.
    No-op if the directory doesn't exist.
    """
    d = Path(dir_path)
    if not d.exists():
        return
    fd = os.open(str(d), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def atomic_write_text(dst: Pathish, text: str, *, encoding: str = "utf-8") -> None:
    """
    Replace dst with `text` in one step:
      - write a temp file next to dst and fsync it
      - os.replace -> dst
      - fsync the directory
    A failed write leaves dst untouched and removes the temp file.
    """
    dst_path = Path(dst)
    dst_dir = dst_path.parent
    dst_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = dst_dir / f".{dst_path.name}.tmp-{os.getpid()}-{uuid.uuid4().hex[:8]}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, dst_path)
        fsync_dir(dst_dir)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def atomic_write_json(dst: Pathish, obj: Any) -> None:
    atomic_write_text(dst, json.dumps(obj, indent=2, ensure_ascii=False))
