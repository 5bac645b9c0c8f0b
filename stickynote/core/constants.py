'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

# Line kinds
KIND_TEXT = "text"
KIND_TODO = "todo"

# Persisted note format
INDENT_MARKER = "  "
MAX_INDENT = 3
TODO_PREFIX_CHECKED = "- [x] "
TODO_PREFIX_UNCHECKED = "- [ ] "
TODO_PREFIX_LEN = len(TODO_PREFIX_CHECKED)

# Persistence
SAVE_DEBOUNCE_MS = 300
MERGE_SEPARATOR = "\n\n---\n\n"
DEFAULT_NOTES_DIR = "~/.stickynote"
NOTES_FORMAT_VERSION = 1
