#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required.

The keymap is a string of 16 comma-separated entries, one for each keypad slot
from 0 to F.  Each entry is a decimal key code, or several joined with '/' so
more than one physical key can press the same slot (e.g. for two players).
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer, force_lowercase=False):
        self.keymap_dict = {}
        self.renderer = renderer
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, keys_defined in enumerate(keymap_split):
            for key_defined in keys_defined.split("/"):
                try:
                    key_defined_ord = int(key_defined)
                except ValueError:
                    raise InputsError("Defined keys are not all integer values") from None

                if force_lowercase:
                    # If we are working with characters rather than keyscan codes, we should convert to lowercase
                    key_defined_ord = ord(chr(key_defined_ord).lower())

                if key_defined_ord in self.keymap_dict:
                    raise InputsError("Duplicate keys defined")

                self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self):
        return False  # Don't exit the program

    def is_key_down(self, key):  # pylint: disable=unused-argument
        return False  # No keys are held

    def get_key_states(self):
        return [self.is_key_down(key) for key in range(NUM_KEYS)]

    def shutdown(self):
        pass
