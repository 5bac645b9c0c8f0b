'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
import sys
import argparse

from stickynote.core.checklist import checklist_progress
from stickynote.core.constants import DEFAULT_NOTES_DIR
from stickynote.core.document import InvalidLineIndex
from stickynote.core.log import Log
from stickynote.core.note_store import (
    create_note,
    get_note_content,
    list_note_ids,
    load_note,
    merge_notes,
    set_note_content,
)
from stickynote.core.session import NoteSession

def _cmd_new(args) -> int:
    note_id = create_note(args.notes_dir, title=args.title)
    print(note_id)
    return 0

def _cmd_list(args) -> int:
    for note_id in list_note_ids(args.notes_dir):
        note = load_note(args.notes_dir, note_id)
        title = note.get("title") or "(untitled)"
        print(f"{note_id}  {title}")
    return 0

def _cmd_show(args) -> int:
    session = NoteSession(get_note_content(args.notes_dir, args.note_id))
    for number, line in enumerate(session.document, start=1):
        if line.is_todo:
            box = "[x]" if line.checked else "[ ]"
            print(f"{number:>4}  {'  ' * line.indent}{box} {line.text}")
        else:
            print(f"{number:>4}  {line.text}")

    done, total = checklist_progress(session.document)
    if total:
        print(f"{done}/{total} done")
    return 0

def _cmd_toggle(args) -> int:
    content = get_note_content(args.notes_dir, args.note_id)
    session = NoteSession(
        content,
        on_commit=lambda text: set_note_content(args.notes_dir, args.note_id, text),
    )
    line = session.document.line(args.line - 1)
    if not line.is_todo:
        print(f"Line {args.line} is not a checklist item", file=sys.stderr)
        return 1
    session.toggle(args.line - 1)
    return 0

def _cmd_merge(args) -> int:
    merge_notes(args.notes_dir, args.target_id, args.source_id)
    print(f"Merged {args.source_id} into {args.target_id}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stickynote", description="StickyNote note tools")
    parser.add_argument(
        "--notes-dir",
        default=DEFAULT_NOTES_DIR,
        help=f"Directory holding the notes (default: {DEFAULT_NOTES_DIR})"
    )
    parser.add_argument(
        "--verbosity",
        type=int, default=0,
        help="Set verbosity level (0=quiet, 1=normal, 2=verbose, 3+=debug)"
    )
    parser.add_argument(
        "--log-file",
        help="Write the session log to this file on exit."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("new", help="Create an empty note and print its id")
    p.add_argument("title", nargs="?", default="")
    p.set_defaults(func=_cmd_new)

    p = sub.add_parser("list", help="List notes")
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser("show", help="Print a note with line numbers")
    p.add_argument("note_id")
    p.set_defaults(func=_cmd_show)

    p = sub.add_parser("toggle", help="Check or uncheck a checklist line (1-based)")
    p.add_argument("note_id")
    p.add_argument("line", type=int)
    p.set_defaults(func=_cmd_toggle)

    p = sub.add_parser("merge", help="Append SOURCE to TARGET and delete SOURCE")
    p.add_argument("target_id")
    p.add_argument("source_id")
    p.set_defaults(func=_cmd_merge)

    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    Log.set_verbosity(args.verbosity)

    try:
        return args.func(args)
    except (InvalidLineIndex, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.log_file:
            Log.write_to_file(args.log_file)
