#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import itertools
import unittest
from unittest import mock
from tchip.audio.a_null import Audio
from tchip.constants import DEFAULT_KEYMAP
from tchip.cpu import CPU
from tchip.host import Host
from tchip.inputs.i_null import Inputs
from tchip.renderers.r_null import Renderer


class RecordingAudio(Audio):
    def __init__(self):
        self.calls = []
        super().__init__()

    def enable_buzzer(self, enabled):
        self.calls.append(enabled)
        super().enable_buzzer(enabled)


class HeldKeyInputs(Inputs):
    def is_key_down(self, key):
        return key == 0x6


class QuittingInputs(Inputs):
    def process_messages(self):
        return True


class TestHost(unittest.TestCase):
    def setUp(self):
        self.cpu = CPU()
        self.renderer = Renderer()
        self.audio = RecordingAudio()

    def _host(self, inputs_class=Inputs):
        return Host(self.cpu, self.renderer, inputs_class(DEFAULT_KEYMAP, self.renderer), self.audio, clock_speed=0)

    def _load(self, *opcodes):
        self.cpu.load_program(b"".join(opcode.to_bytes(2, "big") for opcode in opcodes))

    def test_host_runs_program(self):
        self._load(0x6005, 0x700A, 0x1204)
        self.assertEqual(10, self._host().run(max_cycles=10))
        self.assertEqual(15, self.cpu.v[0x0])
        self.assertEqual(0x204, self.cpu.pc)
        self.assertGreaterEqual(self.renderer.frames_drawn, 1)

    def test_host_quit(self):
        self._load(0x6005)
        self.assertEqual(0, self._host(QuittingInputs).run())
        self.assertEqual(0, self.cpu.v[0x0])

    def test_host_passes_keys(self):
        self._load(0xF30A, 0x1202)
        self._host(HeldKeyInputs).run(max_cycles=2)
        self.assertEqual(0x6, self.cpu.v[0x3])
        self.assertEqual(0x202, self.cpu.pc)

    def test_host_timers_follow_real_time(self):
        self._load(0x6003, 0xF018, 0x1204)

        # Every loop pass sees 20ms go by, so timers tick every pass
        with mock.patch("tchip.host.perf_counter", side_effect=itertools.count(0.0, 0.02)):
            self._host().run(max_cycles=5)

        self.assertEqual([False, True, True, True, False], self.audio.calls)

    def test_host_timers_wait_for_tick(self):
        self._load(0x600A, 0xF015, 0x1204)

        # Time stands still, so only the very first pass ticks
        with mock.patch("tchip.host.perf_counter", return_value=100.0):
            self._host().run(max_cycles=20)

        self.assertEqual(10, self.cpu.dt)
        self.assertEqual([False], self.audio.calls)
