#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here and are only drawn to the actual display (the host
rendering system) when the host loop asks a renderer to draw, normally at 60Hz.
Keeping the framebuffer separate means the CPU never calls out to PyGame or
Curses while executing, which would be very slow at hundreds of thousands of
pixel changes a second.

Programs cannot write directly into video RAM.  Instead, sprites are drawn
using an XOR method: each lit sprite pixel toggles the pixel underneath it.  A
collision is reported whenever a pixel that was already lit gets toggled off.

The screen is 64x32, stored row-major with one byte (0 or 1) per pixel.  Both
axes always wrap, so sprites drawn near an edge tear across to the other side.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class FramebufferError(Exception):
    pass


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        if vid_width <= 0 or vid_height <= 0:
            raise FramebufferError("Screen dimensions must be positive")

        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.vram = RAM(self.vid_size)
        self.changed = True  # Force the first draw

    def clear(self):
        self.vram.clear()
        self.changed = True

    def xor_pixel(self, x, y):
        # Toggles a pixel on, or off if already set.  Returns True if a lit pixel was erased (a collision).
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        pixel = self.vram.read(vram_loc)
        self.vram.write(vram_loc, pixel ^ 1)
        self.changed = True

        return pixel != 0

    def get_pixel(self, x, y):
        return self.vram.read(y * self.vid_width + x)

    def get_rows(self):
        # Read-only snapshot for display sinks and tests
        vid_width = self.vid_width
        mem = self.vram.mem
        return [bytes(mem[y * vid_width:(y + 1) * vid_width]) for y in range(self.vid_height)]

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def pop_changed(self):
        # Report whether anything was drawn since the last call, and reset the flag
        changed = self.changed
        self.changed = False
        return changed
