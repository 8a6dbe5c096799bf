#!/usr/bin/env python3

"""
CPU Emulator

Like a real computer, this is where most of the processing happens.  The CPU
owns all machine state (RAM, registers, stack, timers, keypad and
framebuffer), but drives no loop of its own and never touches the host.  The
host calls step() to run a single instruction, and advance_timers() at 60Hz,
independently of how fast instructions are being executed.

Instructions are looked up in a dictionary by their first nibble.  Families
which share a first nibble are looked up a second time using the opcode masked
down to the bits that identify them.  Anything not found is unsupported, and
is either skipped or halts emulation, depending on the 'strict' setting.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import (
    APP_INTRO, MEM_SIZE, MEM_MASK, PROGRAM_START, FONT_START, FONT_GLYPH_SIZE, STACK_SIZE, NUM_REGISTERS, NUM_KEYS,
    SYSTEM_FONT
)
from .debugger import Debugger
from .framebuffer import Framebuffer
from .ram import RAM
from .stack import Stack, StackError

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class CPUError(Exception):
    pass


class CPU:
    def __init__(self, trace=False, strict=False, rng=None):
        self.ram = RAM(MEM_SIZE)
        self.stack = Stack(STACK_SIZE)
        self.framebuffer = Framebuffer()
        self.debugger = Debugger()
        self.live_debug = trace
        self.strict = strict
        self.rng = Random() if rng is None else rng

        # Define instruction pointers.
        # n = Nibble
        # kk = Byte
        # nnn = address
        # x/y = register (0-15)
        self.instructions = {
            # Initial lookup for instructions' first nibble.  0xB is deliberately absent.
            0x0: self._0nnn,  # Alias for bitmask 0xFFFF
            0x1: self._1nnn,
            0x2: self._2nnn,
            0x3: self._3xkk,
            0x4: self._4xkk,
            0x5: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x6: self._6xkk,
            0x7: self._7xkk,
            0x8: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0x9: self._5nnn_8nnn_9nnn,  # Alias for bitmask 0xF00F
            0xA: self._Annn,
            0xC: self._Cxkk,
            0xD: self._Dxyn,
            0xE: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            0xF: self._Ennn_Fnnn,  # Alias for bitmask 0xF0FF
            # Instructions beginning with nibble 0x0, bitmask 0xFFFF (i.e., exact match)
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            # Instructions beginning with nibble 0x5/0x8/0x9, bitmask 0xF00F
            0x5000: self._5xy0,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Initialise registers
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Vf doubles as the carry/borrow/collision flag
        self.i = 0  # Index register (16-bit)

        # Initialise timers
        self.dt = 0  # Delay timer (byte)
        self.ds = 0  # Sound timer (byte)

        # Initialise program counter and current opcode
        self.pc = PROGRAM_START
        self.debug_pc = PROGRAM_START
        self.opcode = 0

        # Input-related vars.  Overwritten by the host before each step.
        self.keypad = [False] * NUM_KEYS

        # Write system font into the reserved area of RAM
        self.ram.write_block(FONT_START, SYSTEM_FONT)

    def load_program(self, data):
        # Raises RAMError, without writing anything, if the program doesn't fit
        self.ram.write_block(PROGRAM_START, data)

    def set_keys(self, key_states):
        if len(key_states) != NUM_KEYS:
            raise CPUError("Keypad state must contain exactly {} keys".format(NUM_KEYS))

        self.keypad[:] = [bool(key_down) for key_down in key_states]

    def step(self):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        self.inc_pc()  # Program counter updates after fetch, but before execute, so jumps are absolute
        self.decode_exec()

    def advance_timers(self):
        # Returns True if the buzzer should sound for this tick
        if self.dt > 0:
            self.dt -= 1

        if self.ds > 0:
            self.ds -= 1
            return True

        return False

    def fetch(self):
        pc = self.pc
        return int.from_bytes((self.ram.read(pc), self.ram.read((pc + 1) & MEM_MASK)), CPU_ENDIAN, signed=False)

    def _call_masked_instruction(self, masked_opcode):
        instruction = self.instructions.get(masked_opcode)

        if instruction is None:
            self._opcode_unsupported()
            return

        instruction()

    def decode_exec(self):
        self._call_masked_instruction((0xF000 & self.opcode) >> 12)

    def inc_pc(self):
        self.pc = (self.pc + 2) & MEM_MASK

    def dec_pc(self):
        # Only used to re-run instructions (i.e. keypress wait).
        self.pc = (self.pc - 2) & MEM_MASK

    def get_stack_pointer(self):
        return self.stack.get_pointer()

    # References to Vx, Vy, byte and addr are always in the same opcode position throughout all instructions, so avoid
    # excessive code duplication (ever so slight slowdown).  Don't reference these more than necessary as they are
    # recalculated each time.
    @property
    def vx(self):
        return (self.opcode & 0xF00) >> 8

    @property
    def vy(self):
        return (self.opcode & 0xF0) >> 4

    @property
    def addr(self):
        return self.opcode & 0xFFF

    @property
    def byte(self):
        return self.opcode & 0xFF

    @property
    def nibble(self):
        return self.opcode & 0xF

    def _opcode_unsupported(self):
        if self.live_debug:
            self.debug("???")

        message = "Opcode 0x{:04x} at address 0x{:03x} is not emulated.".format(self.opcode, self.debug_pc)
        self.debugger.report(message)

        if self.strict:
            self._halt("???", message)

    def _halt(self, instruction, message):
        raise CPUError(
            "Emulation halted.\n\n{}Debug info:\n{}\n\n{}".format(
                APP_INTRO, self.debugger.debug(self, instruction, verbose=True), message
            )
        ) from None

    def debug(self, instruction):
        self.debugger.output(self, instruction)

    def _0nnn(self):
        opcode = self.opcode

        if opcode < 0x10:
            # Opcodes 0x0 - 0xF are used internally for indexing the first nibble, so never look them up directly
            self._opcode_unsupported()
            return

        self._call_masked_instruction(opcode)

    def _5nnn_8nnn_9nnn(self):
        self._call_masked_instruction(self.opcode & 0xF00F)

    def _Ennn_Fnnn(self):
        self._call_masked_instruction(self.opcode & 0xF0FF)

    def _00E0(self):  # CLS
        if self.live_debug:
            self.debug("CLS")

        self.framebuffer.clear()

    def _00EE(self):  # RET
        if self.live_debug:
            self.debug("RET")

        try:
            self.pc = self.stack.pop()
        except StackError as e:
            self._halt("RET", "{} at address 0x{:03x}.".format(e, self.debug_pc))

    def _1nnn(self):  # JP addr
        if self.live_debug:
            self.debug("JP 0x{:03x}".format(self.addr))

        self.pc = self.addr

    def _2nnn(self):  # CALL addr
        if self.live_debug:
            self.debug("CALL 0x{:03x}".format(self.addr))

        try:
            self.stack.push(self.pc)
        except StackError as e:
            self._halt("CALL 0x{:03x}".format(self.addr), "{} at address 0x{:03x}.".format(e, self.debug_pc))

        self.pc = self.addr

    def _3xkk(self):  # SE Vx, byte
        if self.live_debug:
            self.debug("SE V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        if self.v[self.vx] == self.byte:
            self.inc_pc()

    def _4xkk(self):  # SNE Vx, byte
        if self.live_debug:
            self.debug("SNE V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        if self.v[self.vx] != self.byte:
            self.inc_pc()

    def _5xy0(self):  # SE Vx, Vy
        if self.live_debug:
            self.debug("SE V{:01x}, V{:01x}".format(self.vx, self.vy))

        if self.v[self.vx] == self.v[self.vy]:
            self.inc_pc()

    def _6xkk(self):  # LD Vx, byte
        if self.live_debug:
            self.debug("LD V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        self.v[self.vx] = self.byte

    def _7xkk(self):  # ADD Vx, byte
        vx = self.vx
        byte = self.byte

        if self.live_debug:
            self.debug("ADD V{:01x}, 0x{:02x}".format(vx, byte))

        # No carry flag for this one
        byte += self.v[vx]
        self.v[vx] = byte & 0xFF

    def _8xy0(self):  # LD Vx, Vy
        if self.live_debug:
            self.debug("LD V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] = self.v[self.vy]

    def _8xy1(self):  # OR Vx, Vy
        if self.live_debug:
            self.debug("OR V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] |= self.v[self.vy]

    def _8xy2(self):  # AND Vx, Vy
        if self.live_debug:
            self.debug("AND V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] &= self.v[self.vy]

    def _8xy3(self):  # XOR Vx, Vy
        if self.live_debug:
            self.debug("XOR V{:01x}, V{:01x}".format(self.vx, self.vy))

        self.v[self.vx] ^= self.v[self.vy]

    # Flag-setting 8 instructions write Vf BEFORE Vx, as Vf can be specified in the parameters.  The result wins.
    def _8xy4(self):  # ADD Vx, Vy
        vx = self.vx
        vy = self.vy

        if self.live_debug:
            self.debug("ADD V{:01x}, V{:01x}".format(vx, vy))

        val = self.v[vx] + self.v[vy]
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying
        self.v[vx] = val & 0xFF

    def _post_8xy5_8xy7(self, val):  # Post-SUB/SUBN
        self.v[0xF] = int(val >= 0)  # Vf is set when NOT borrowing
        self.v[self.vx] = val & 0xFF

    def _8xy5(self):  # SUB Vx, Vy
        if self.live_debug:
            self.debug("SUB V{:01x}, V{:01x}".format(self.vx, self.vy))

        self._post_8xy5_8xy7(self.v[self.vx] - self.v[self.vy])

    def _8xy6(self):  # SHR Vx
        if self.live_debug:
            self.debug("SHR V{:01x}".format(self.vx))

        val = self.v[self.vx]
        self.v[0xF] = val & 1  # The bit shifted out
        self.v[self.vx] = val >> 1

    def _8xy7(self):  # SUBN Vx, Vy
        if self.live_debug:
            self.debug("SUBN V{:01x}, V{:01x}".format(self.vx, self.vy))

        self._post_8xy5_8xy7(self.v[self.vy] - self.v[self.vx])

    def _8xyE(self):  # SHL Vx
        if self.live_debug:
            self.debug("SHL V{:01x}".format(self.vx))

        val = self.v[self.vx]
        self.v[0xF] = val >> 7  # The bit shifted out
        self.v[self.vx] = (val << 1) & 0xFF

    def _9xy0(self):  # SNE Vx, Vy
        if self.live_debug:
            self.debug("SNE V{:01x}, V{:01x}".format(self.vx, self.vy))

        if self.v[self.vx] != self.v[self.vy]:
            self.inc_pc()

    def _Annn(self):  # LD I, addr
        if self.live_debug:
            self.debug("LD I, 0x{:03x}".format(self.addr))

        self.i = self.addr

    def _Cxkk(self):  # RND Vx, byte
        if self.live_debug:
            self.debug("RND V{:01x}, 0x{:02x}".format(self.vx, self.byte))

        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[self.vx] = self.rng.randint(0, 0xFF) & self.byte

    def _Dxyn(self):  # DRW Vx, Vy, nibble
        height = self.nibble

        if self.live_debug:
            self.debug("DRW V{:01x}, V{:01x}, 0x{:01x}".format(self.vx, self.vy, height))

        # Both axes wrap for every pixel, not just the sprite's start, so sprites tear across the screen edges
        vx_pos = self.v[self.vx]
        vy_pos = self.v[self.vy]
        xor_pixel = self.framebuffer.xor_pixel
        collided = False
        i = self.i

        for y in range(height):
            spr_data = self.ram.read((i + y) & MEM_MASK)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    if xor_pixel(vx_pos + x, vy_pos + y):
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

        self.v[0xF] = int(collided)

    def _Ex9E(self):  # SKP Vx
        if self.live_debug:
            self.debug("SKP V{:01x}".format(self.vx))

        if self.keypad[self.v[self.vx] & 0xF]:
            self.inc_pc()

    def _ExA1(self):  # SKNP Vx
        if self.live_debug:
            self.debug("SKNP V{:01x}".format(self.vx))

        if not self.keypad[self.v[self.vx] & 0xF]:
            self.inc_pc()

    def _Fx07(self):  # LD Vx, DT
        if self.live_debug:
            self.debug("LD V{:01x}, DT".format(self.vx))

        self.v[self.vx] = self.dt

    def _Fx0A(self):  # LD Vx, K
        if self.live_debug:
            self.debug("LD V{:01x}, K".format(self.vx))

        # This opcode waits for a keypress, but since the timers still need to expire correctly and the host still
        # needs to draw the screen, we return control to the host and simply rewind the program counter.  The host
        # keeps calling step(), so we keep coming back here until a key is held.
        for key, key_down in enumerate(self.keypad):
            if key_down:
                self.v[self.vx] = key
                return

        self.dec_pc()

    def _Fx15(self):  # LD DT, Vx
        if self.live_debug:
            self.debug("LD DT, V{:01x}".format(self.vx))

        self.dt = self.v[self.vx]

    def _Fx18(self):  # LD ST, Vx
        if self.live_debug:
            self.debug("LD ST, V{:01x}".format(self.vx))

        self.ds = self.v[self.vx]

    def _Fx1E(self):  # ADD I, Vx
        if self.live_debug:
            self.debug("ADD I, V{:01x}".format(self.vx))

        # No overflow flag
        self.i = (self.i + self.v[self.vx]) & 0xFFFF

    def _Fx29(self):  # LD F, Vx
        if self.live_debug:
            self.debug("LD F, V{:01x}".format(self.vx))

        self.i = FONT_START + FONT_GLYPH_SIZE * (self.v[self.vx] & 0xF)

    def _Fx33(self):  # LD B, Vx
        if self.live_debug:
            self.debug("LD B, V{:01x}".format(self.vx))

        val = self.v[self.vx]
        i = self.i
        self.ram.write(i & MEM_MASK, val // 100)              # Most-significant digit
        self.ram.write((i + 1) & MEM_MASK, (val // 10) % 10)  # Middle digit
        self.ram.write((i + 2) & MEM_MASK, val % 10)          # Least-significant digit

    def _Fx55(self):  # LD [I], Vx
        if self.live_debug:
            self.debug("LD [I], V{:01x}".format(self.vx))

        # I is left unchanged afterwards
        i = self.i

        for reg in range(self.vx + 1):
            self.ram.write((i + reg) & MEM_MASK, self.v[reg])

    def _Fx65(self):  # LD Vx, [I]
        if self.live_debug:
            self.debug("LD V{:01x}, [I]".format(self.vx))

        i = self.i

        for reg in range(self.vx + 1):
            self.v[reg] = self.ram.read((i + reg) & MEM_MASK)
