#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "TinyChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Machine layout
MEM_SIZE = 0x1000
MEM_MASK = MEM_SIZE - 1
PROGRAM_START = 0x200  # Everything below here is reserved for the interpreter
FONT_START = 0x50
FONT_GLYPH_SIZE = 5
STACK_SIZE = 16
NUM_REGISTERS = 0x10
NUM_KEYS = 0x10
VID_WIDTH = 64
VID_HEIGHT = 32

# Timing
TIMER_FREQ = 60.0    # 60Hz delay/sound timer refresh
DISPLAY_FREQ = 60.0  # 60Hz display refresh and input polling
DEFAULT_CLOCK_SPEED = 700  # Operations per second

# Built-in hexadecimal font, 5 rows of 4 pixels (left-aligned in each byte) per digit
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Default mappings for keys 0-F.  Each slot takes one or more key codes separated by '/'.  PyGame keyscans and ASCII
# characters match for lowercase letters and digits, so this works for both input plugins.  Two players can share the
# keypad: WASD for player one (5/4/6/D) and IJKL for player two (8/7/9/E).
DEFAULT_KEYMAP = ",".join((
    "120",         # 0: x
    "49",          # 1: 1
    "50",          # 2: 2
    "51",          # 3: 3
    "97/113",      # 4: a, q
    "119",         # 5: w
    "115/101",     # 6: s, e
    "106",         # 7: j
    "105",         # 8: i
    "107",         # 9: k
    "122",         # A: z
    "99",          # B: c
    "52",          # C: 4
    "100/114",     # D: d, r
    "108",         # E: l
    "118"          # F: v
))

# Startup
SUPPORTED_RENDERERS = ["pygame", "curses", "null"]
