#!/usr/bin/env python3

"""
Host Loop

The CPU only ever runs one instruction when asked, so something has to keep
asking.  Each pass of the loop:
    * Pumps host events and redraws the screen, at 60Hz
    * Copies the current keypad state into the CPU
    * Runs one instruction
    * Ticks the delay and sound timers, at 60Hz of real time
    * Busy-waits until the next instruction is due, if the clock is capped

Timers are linked to actual time rather than the instruction count, so if the
host gets lagged, the timers will still count down at the right speed.

Alterations should be checked against the reported 'operations per second'
figure, to ensure any changes are an improvement.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, DISPLAY_FREQ, TIMER_FREQ

DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ
TIMER_INTERVAL = 1.0 / TIMER_FREQ


class Host:
    def __init__(self, cpu, renderer, inputs, audio, clock_speed=None):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio

        # User can specify 0 for uncapped
        auto_clock_speed = DEFAULT_CLOCK_SPEED if clock_speed is None else clock_speed
        self.core_interval = None if auto_clock_speed <= 0 else 1.0 / auto_clock_speed

        # Scheduling
        self.next_display_update_time = 0
        self.next_timer_update_time = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0
        self.report_perf()

    def run(self, max_cycles=None):
        # Returns the number of instructions executed, once the user quits or max_cycles is reached
        cpu = self.cpu
        cycles = 0

        while max_cycles is None or cycles < max_cycles:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= self.next_perf_report_time:
                self.next_perf_report_time = int(this_time) + 1.0
                # Reporting the performance should be done before a refresh, as refreshing will likely show the report
                self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Prevent unnecessary display rendering in excess of host frame rate
            if this_time >= self.next_display_update_time:
                if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                    break

                self.next_display_update_time = this_time + DISPLAY_INTERVAL
                self.renderer.draw(cpu.framebuffer)
                self.perf_counter_fps += 1

            cpu.set_keys(self.inputs.get_key_states())
            cpu.step()
            cycles += 1

            if this_time >= self.next_timer_update_time:
                self.next_timer_update_time = this_time + TIMER_INTERVAL
                self.audio.enable_buzzer(cpu.advance_timers())

            if self.core_interval is not None:
                # Wait for next CPU instruction.  Do this last for maximum precision (takes into account time spent on
                # this instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

            self.perf_counter_ops += 1

        # Show whatever was drawn last before handing back
        self.renderer.draw(cpu.framebuffer)
        return cycles

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
