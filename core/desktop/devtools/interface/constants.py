"""Interface-level constants for the todo TUI."""

# Normalized key tokens fed to the input controller; printable keys are the character itself.
KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"

LIST_TITLE = " TODO List "
INPUT_TITLE = " Add Task "
HELP_TEXT = "↑ ↓ OR j k: Move | SpaceBar: Toggle | a: Add | d: Delete | q: Quit"
COMPOSE_HELP_TEXT = "Enter: Save | Esc: Cancel | Backspace: Delete char"
EMPTY_LIST_HINT = "No tasks yet. Press 'a' to add one."

DONE_MARKER = "[✔] "
OPEN_MARKER = "[ ] "

# Bounded input wait: the screen is redrawn at least this often.
REFRESH_INTERVAL = 0.25

# Seconds to wait for the rest of an escape sequence, so Esc leaves Compose promptly.
TTIMEOUTLEN = 0.05
