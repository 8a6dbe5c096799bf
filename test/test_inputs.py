#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from tchip.constants import DEFAULT_KEYMAP
from tchip.inputs.i_null import Inputs, InputsError
from tchip.renderers.r_null import Renderer

SIMPLE_KEYMAP = ",".join(str(code) for code in range(48, 64))


class TestInputs(unittest.TestCase):
    def setUp(self):
        self.renderer = Renderer()
        self.inputs = Inputs(DEFAULT_KEYMAP, self.renderer)

    def test_inputs_default_keymap(self):
        keymap_dict = self.inputs.keymap_dict
        self.assertEqual(0x0, keymap_dict[ord("x")])
        self.assertEqual(0x1, keymap_dict[ord("1")])
        self.assertEqual(0xC, keymap_dict[ord("4")])
        self.assertEqual(0xF, keymap_dict[ord("v")])

    def test_inputs_two_players(self):
        keymap_dict = self.inputs.keymap_dict
        self.assertEqual(
            [0x5, 0x4, 0x6, 0xD],
            [keymap_dict[ord(char)] for char in "wasd"]
        )
        self.assertEqual(
            [0x8, 0x7, 0x9, 0xE],
            [keymap_dict[ord(char)] for char in "ijkl"]
        )
        self.assertEqual(keymap_dict[ord("a")], keymap_dict[ord("q")])

    def test_inputs_simple_keymap(self):
        inputs = Inputs(SIMPLE_KEYMAP, self.renderer)
        self.assertEqual(16, len(inputs.keymap_dict))
        self.assertEqual(0xF, inputs.keymap_dict[63])

    def test_inputs_force_lowercase(self):
        inputs = Inputs("65/66," + ",".join(str(code) for code in range(48, 63)), self.renderer, force_lowercase=True)
        self.assertEqual(0x0, inputs.keymap_dict[97])
        self.assertEqual(0x0, inputs.keymap_dict[98])
        self.assertNotIn(65, inputs.keymap_dict)

    def test_inputs_wrong_count(self):
        self.assertRaises(InputsError, Inputs, "1,2,3", self.renderer)
        self.assertRaises(InputsError, Inputs, SIMPLE_KEYMAP + ",99", self.renderer)

    def test_inputs_not_integer(self):
        self.assertRaises(InputsError, Inputs, SIMPLE_KEYMAP.replace("48", "x"), self.renderer)
        self.assertRaises(InputsError, Inputs, SIMPLE_KEYMAP.replace("48", "48/"), self.renderer)

    def test_inputs_duplicate(self):
        self.assertRaises(InputsError, Inputs, SIMPLE_KEYMAP.replace("48", "49"), self.renderer)
        self.assertRaises(InputsError, Inputs, SIMPLE_KEYMAP.replace("48", "48/48"), self.renderer)

    def test_inputs_null_behaviour(self):
        self.assertFalse(self.inputs.process_messages())
        self.assertEqual([False] * 16, self.inputs.get_key_states())
        self.inputs.shutdown()
