from __future__ import annotations

import json, shutil, time, uuid
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from stickynote.core.constants import MERGE_SEPARATOR, NOTES_FORMAT_VERSION
from stickynote.core.log import Log
from stickynote.utils.fs_atomic import atomic_write_json, fsync_dir

def _read_json(p: Path, default: Any) -> Any:
    try:
        return json.loads(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed JSON in {p}: {e}") from e

def notes_paths(notes_dir: str):
    notes_path = Path(notes_dir).expanduser().resolve()
    return {
        "root": notes_path,
        "notes_json": notes_path / "notes.json",
        "notes": notes_path / "notes",
    }

# ---------- notes.json ----------

def ensure_notes_dir(notes_dir: str) -> Dict[str, Any]:
    """
    Create or load a notes directory.

    Structure:
    <notes_dir>/
      notes.json
      notes/<id[:2]>/<id>/note.json

    Returns the notes.json metadata.
    """
    paths = notes_paths(notes_dir)
    metadata = _read_json(paths["notes_json"], {})
    if metadata:
        return metadata

    paths["notes"].mkdir(parents=True, exist_ok=True)
    metadata = {
        "version": NOTES_FORMAT_VERSION,
        "created_ts": int(time.time()),
        "note_ids": [],
    }
    atomic_write_json(paths["notes_json"], metadata)
    Log.debug(f"Created notes directory {paths['root']}", 1)
    return metadata

def list_note_ids(notes_dir: str) -> List[str]:
    return list(ensure_notes_dir(notes_dir).get("note_ids", []))

def _set_note_ids(notes_dir: str, ids: List[str]) -> None:
    metadata = ensure_notes_dir(notes_dir)
    metadata["note_ids"] = list(ids)
    atomic_write_json(notes_paths(notes_dir)["notes_json"], metadata)

# ---------- notes/<shard>/<id>/note.json ----------

def _new_id() -> str:
    return uuid.uuid4().hex[:12]

def note_dir(notes_dir: str, note_id: str) -> Path:
    return notes_paths(notes_dir)["notes"] / note_id[:2] / note_id

def note_json_path(notes_dir: str, note_id: str) -> Path:
    return note_dir(notes_dir, note_id) / "note.json"

def create_note(notes_dir: str, title: str = "", content: str = "") -> str:
    """Create a note and append it to the index. Returns the new note id."""
    note_id = _new_id()
    now = int(time.time())
    note = {
        "id": note_id,
        "title": title,
        "content": content,
        "created_ts": now,
        "updated_ts": now,
    }
    atomic_write_json(note_json_path(notes_dir, note_id), note)

    ids = list_note_ids(notes_dir)
    ids.append(note_id)
    _set_note_ids(notes_dir, ids)
    Log.debug(f"Created note {note_id}", 1)
    return note_id

def load_note(notes_dir: str, note_id: str) -> Dict[str, Any]:
    path = note_json_path(notes_dir, note_id)
    if not path.exists():
        raise ValueError(f"note.json for id={note_id} not found")
    return _read_json(path, {})

def save_note(notes_dir: str, note: Dict[str, Any]) -> None:
    note["updated_ts"] = int(time.time())
    atomic_write_json(note_json_path(notes_dir, note["id"]), note)

def get_note_content(notes_dir: str, note_id: str) -> str:
    return load_note(notes_dir, note_id).get("content", "")

def set_note_content(notes_dir: str, note_id: str, content: str) -> None:
    note = load_note(notes_dir, note_id)
    note["content"] = content
    save_note(notes_dir, note)
    Log.debug(f"Saved note {note_id} ({len(content)} chars)", 1)

def delete_note(notes_dir: str, note_id: str) -> None:
    d = note_dir(notes_dir, note_id)
    if not d.exists():
        raise ValueError(f"note id={note_id} not found")

    ids = [i for i in list_note_ids(notes_dir) if i != note_id]
    _set_note_ids(notes_dir, ids)
    shutil.rmtree(d)
    fsync_dir(d.parent)
    Log.debug(f"Deleted note {note_id}", 1)

# ---------- Merge ----------

def merge_content(target: str, source: str) -> str:
    """Append source below target, with a rule between them only when both have content."""
    separator = MERGE_SEPARATOR if target and source else ""
    return target + separator + source

def merge_notes(notes_dir: str, target_id: str, source_id: str,
                flush: Optional[Callable[[], Any]] = None) -> str:
    """
    Fold the source note into the target and delete the source.
    `flush` must write any pending edits of the source note first, so it is
    called before either note is read. Returns the merged content.
    """
    if target_id == source_id:
        raise ValueError("cannot merge a note into itself")

    if flush is not None:
        flush()

    target = load_note(notes_dir, target_id)
    source = load_note(notes_dir, source_id)

    merged = merge_content(target.get("content", ""), source.get("content", ""))
    target["content"] = merged
    save_note(notes_dir, target)
    try:
        delete_note(notes_dir, source_id)
    except (OSError, ValueError) as e:
        # Target already holds the merged text; the source is still on disk.
        Log.debug(f"Merged note {source_id} into {target_id} but could not delete source: {e}", 0)
        raise
    Log.debug(f"Merged note {source_id} into {target_id}", 1)
    return merged
