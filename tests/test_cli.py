from stickynote.cli import main
from stickynote.core import note_store as store


def test_new_list_and_show(tmp_path, capsys):
    notes_dir = str(tmp_path)
    assert main(["--notes-dir", notes_dir, "new", "Chores"]) == 0
    note_id = capsys.readouterr().out.strip()
    store.set_note_content(notes_dir, note_id, "Today\n- [ ] dishes\n  - [x] plates")

    assert main(["--notes-dir", notes_dir, "list"]) == 0
    assert f"{note_id}  Chores" in capsys.readouterr().out

    assert main(["--notes-dir", notes_dir, "show", note_id]) == 0
    out = capsys.readouterr().out
    assert "[ ] dishes" in out
    assert "  [x] plates" in out
    assert "1/2 done" in out


def test_toggle_cascades_and_saves(tmp_path):
    notes_dir = str(tmp_path)
    note_id = store.create_note(notes_dir, content="- [ ] trip\n  - [x] tickets\n  - [ ] bags")
    assert main(["--notes-dir", notes_dir, "toggle", note_id, "3"]) == 0
    assert store.get_note_content(notes_dir, note_id) == "- [x] trip\n  - [x] tickets\n  - [x] bags"


def test_toggle_errors(tmp_path, capsys):
    notes_dir = str(tmp_path)
    note_id = store.create_note(notes_dir, content="plain")
    assert main(["--notes-dir", notes_dir, "toggle", note_id, "1"]) == 1
    assert main(["--notes-dir", notes_dir, "toggle", note_id, "9"]) == 1
    assert main(["--notes-dir", notes_dir, "toggle", "nosuchnote00", "1"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_merge_command(tmp_path):
    notes_dir = str(tmp_path)
    target = store.create_note(notes_dir, content="a")
    source = store.create_note(notes_dir, content="b")
    assert main(["--notes-dir", notes_dir, "merge", target, source]) == 0
    assert store.get_note_content(notes_dir, target) == "a\n\n---\n\nb"


def test_log_file_written(tmp_path):
    log_path = tmp_path / "session.log"
    assert main(["--notes-dir", str(tmp_path), "--verbosity", "1",
                 "--log-file", str(log_path), "new"]) == 0
    assert "Created note" in log_path.read_text(encoding="utf-8")
