#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "DigitStack"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Stack limits.  Only single digits are accepted by the command parser, the stack itself takes any integer
DEFAULT_CAPACITY = 3
DIGITS = "0123456789"

# Block colours for digits 0-9, looked up by index.  Anything else is drawn grey
DIGIT_COLOURS = [
    0xE57373,  # Red
    0xF06292,  # Pink
    0xBA68C8,  # Purple
    0x9575CD,  # Deep purple
    0x7986CB,  # Indigo
    0x64B5F6,  # Blue
    0x4FC3F7,  # Light blue
    0x4DB6AC,  # Teal
    0x81C784,  # Green
    0xFFB74D   # Orange
]
UNKNOWN_COLOUR = 0x888888

# Block layout, in density-independent units
BLOCK_HEIGHT_DP = 60
BLOCK_MARGIN_DP = 8
BLOCK_PADDING_DP = 16

# User-facing text
MSG_READY = "Ready. Enter a command."
MSG_OUTPUT_PREFIX = "Output: "
MSG_STACK_EMPTY_PLACEHOLDER = "Stack is empty"
MSG_ENTER_COMMAND = "Please enter a command (push X, pop, or quit)"
MSG_INVALID_COMMAND = "Invalid command. Use: push X (0-9), pop, or quit"
MSG_MISSING_SPACE = "Format Error: Missing space between 'push' and '{0}'. Use: push {0}"
MSG_INVALID_PUSH = "Invalid push format. Use: push X (where X is 0-9)"
MSG_INVALID_VALUE = "Error: Value must be a single digit (0-9)"
MSG_PUSHED = "{} is pushed. Stack {}"
MSG_FULL = "Stack is FULL. Stack {}"
MSG_POPPED = "{} is popped. Stack {}"
MSG_EMPTY = "Stack is EMPTY. Stack {}"
MSG_QUIT = "Exiting application..."
