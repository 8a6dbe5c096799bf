#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from tchip import StartupError, load_plugins, main
from tchip.audio.a_null import Audio
from tchip.constants import DEFAULT_KEYMAP
from tchip.inputs.i_null import Inputs, InputsError
from tchip.renderers.r_null import Renderer
from tinychip import parse_args


class TestStartup(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.args = {
            "filename": os.path.join(self.temp_dir.name, "test.ch8"),
            "debug": False,
            "strict": False,
            "renderer": "null",
            "clock_speed": 0,
            "scale": None,
            "mute": None,
            "keymap": None
        }

    def tearDown(self):
        self.temp_dir.cleanup()

    def _write_rom(self, data):
        with open(self.args["filename"], "wb") as f:
            f.write(data)

    def test_startup_null_plugins(self):
        self.assertEqual((Renderer, Inputs, Audio), load_plugins("null", None))

    def test_startup_unknown_renderer(self):
        self.assertRaises(StartupError, load_plugins, "teletype", None)

    def test_startup_missing_rom(self):
        with redirect_stdout(io.StringIO()):
            self.assertRaises(StartupError, main, self.args)

    def test_startup_rom_too_large(self):
        self._write_rom(b"\x00" * 0xE01)

        with redirect_stdout(io.StringIO()):
            with self.assertRaises(StartupError) as context:
                main(self.args)

        self.assertIn("too large", str(context.exception))

    def test_startup_bad_keymap(self):
        self._write_rom(b"\x12\x00")
        self.args["keymap"] = "1,2,3"

        with redirect_stdout(io.StringIO()):
            self.assertRaises(InputsError, main, self.args)

    def test_cli_args(self):
        args = vars(parse_args(["game.ch8", "--debug", "--strict", "-r", "null", "-c", "0"]))
        self.assertEqual("game.ch8", args["filename"])
        self.assertTrue(args["debug"])
        self.assertTrue(args["strict"])
        self.assertEqual("null", args["renderer"])
        self.assertEqual(0, args["clock_speed"])
        self.assertEqual(DEFAULT_KEYMAP, args["keymap"])

    def test_cli_defaults(self):
        args = vars(parse_args(["game.ch8"]))
        self.assertFalse(args["debug"])
        self.assertFalse(args["strict"])
        self.assertIsNone(args["renderer"])
        self.assertIsNone(args["clock_speed"])

    def test_cli_missing_rom(self):
        with redirect_stderr(io.StringIO()) as stderr:
            with self.assertRaises(SystemExit) as context:
                parse_args([])

        self.assertNotEqual(0, context.exception.code)
        self.assertIn("usage:", stderr.getvalue())
