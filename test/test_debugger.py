#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from tchip.cpu import CPU
from tchip.debugger import Debugger


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.cpu = CPU()
        self.cpu.opcode = 0xA123
        self.cpu.debug_pc = 0x20A
        self.cpu.v[0x0] = 0x01
        self.cpu.v[0x3] = 0xFF
        self.cpu.v[0xF] = 0x0E

    def test_debugger_trace(self):
        self.assertEqual(
            "PC: 0x20a OP: 0xa123 V0-V3: 0x01 0x00 0x00 0xff IN: LD I, 0x123",
            self.debugger.trace(self.cpu, "LD I, 0x123")
        )

    def test_debugger_output(self):
        with redirect_stdout(io.StringIO()) as stdout:
            self.debugger.output(self.cpu, "CLS")

        self.assertTrue(stdout.getvalue().startswith("PC: 0x20a OP: 0xa123"))

    def test_debugger_debug(self):
        self.cpu.i = 0x345
        self.cpu.dt = 0x10
        self.cpu.ds = 0x20
        self.assertEqual(
            "V: 0x0e0000000000000000000000ff000001 I: 0x0345 DT: 0x10 ST: 0x20 PC: 0x20a OP: 0xa123 IN: ???",
            self.debugger.debug(self.cpu, "???")
        )

    def test_debugger_debug_verbose(self):
        self.assertTrue(self.debugger.debug(self.cpu, "???", verbose=True).endswith("\nStack: (Empty)"))
        self.cpu.stack.push(0x202)
        self.cpu.stack.push(0x30A)
        self.assertTrue(self.debugger.debug(self.cpu, "???", verbose=True).endswith("\nStack: 0x202 0x30a"))

    def test_debugger_report(self):
        with redirect_stderr(io.StringIO()) as stderr:
            self.debugger.report("Something odd")

        self.assertEqual("Something odd\n", stderr.getvalue())
