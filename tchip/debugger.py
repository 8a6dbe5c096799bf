#!/usr/bin/env python3

"""
CPU Debugger

If live tracing is enabled, this will output a line before each instruction
executed:
    * PC    - Program counter the instruction was fetched from
    * OP    - OpCode number
    * V0-V3 - The first four [V] registers
    * IN    - Decoded instruction ('???' if not recognised)

If a crash occurs, a full dump is produced instead:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction
    * Stack - Stack contents

Non-fatal problems (such as skipping an unrecognised instruction) are reported
on stderr so they do not get mixed up with trace output.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import sys


class Debugger:
    def trace(self, cpu, instruction):
        return "PC: 0x{:03x} OP: 0x{:04x} V0-V3: 0x{:02x} 0x{:02x} 0x{:02x} 0x{:02x} IN: {}".format(
            cpu.debug_pc, cpu.opcode, cpu.v[0], cpu.v[1], cpu.v[2], cpu.v[3], instruction
        )

    def debug(self, cpu, instruction, verbose=False):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.i, cpu.dt, cpu.ds, cpu.debug_pc, cpu.opcode, instruction]
        )

        if verbose:
            stack_items = cpu.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def output(self, cpu, instruction):
        print(self.trace(cpu, instruction))

    def report(self, message):
        print(message, file=sys.stderr)
