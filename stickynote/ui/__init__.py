'''
wx glue for hosting a note editor. Requires the "gui" extra (wxPython).

A host window wires one open note like this:

    saver = AutoSaver(lambda text: set_note_content(notes_dir, note_id, text))
    session = NoteSession(get_note_content(notes_dir, note_id), on_commit=saver.save)

    def on_key_down(evt):          # bound to each line's text control
        if not handle_key_event(session, line_index, evt, selection):
            evt.Skip()
        target = session.take_focus()   # move focus / caret to target.line

Call saver.save_now() before merging notes and when the window closes.
'''
