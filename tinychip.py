#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from tchip import main
from tchip.constants import DEFAULT_KEYMAP, SUPPORTED_RENDERERS


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="print the program counter, opcode and registers V0-V3 before every instruction.  Slows CPU execution"
    )
    parser.add_argument(
        "-s", "--strict", action="store_true", default=False,
        help="halt on unrecognised instructions instead of skipping them"
    )
    parser.add_argument(
        "-c", "--clock_speed", type=int,
        help="set the CPU speed in operations/second (default 700, 0 = uncapped)"
    )
    parser.add_argument(
        "-r", "--renderer", choices=SUPPORTED_RENDERERS,
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "--scale", type=int,
        help="set the window width in PyGame mode (default 640), and scale in Curses mode (default 2)"
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help=" ".join((
            "redefine the 16 keyscan codes (PyGame) or character numbers (Curses).  Separate each key with a comma,",
            "and join alternative codes for the same key with a slash"
        ))
    )
    return parser.parse_args(argv)  # Prints usage and calls sys.exit(2) if args are incorrect or the ROM is missing


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the emulator from a GUI by calling this with a dictionary
    main(args)
