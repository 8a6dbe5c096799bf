#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

A renderer is a display sink: it never changes the framebuffer, it only reads
it.  When draw() finds the framebuffer has changed, every pixel is handed to
set_pixel(), then the display is refreshed in one go.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  Without a renderer, performance data will also not be shown.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale

        if self.scale <= 0:
            raise RendererError("Scale must be a positive number.")

        self.frames_drawn = 0
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def draw(self, framebuffer):
        if not framebuffer.pop_changed():
            return

        vid_width, vid_height = framebuffer.get_vid_size()

        if (vid_width, vid_height) != (self.width, self.height):
            self.set_resolution(vid_width, vid_height)

        for y, row in enumerate(framebuffer.get_rows()):
            for x, pixel in enumerate(row):
                self.set_pixel(x, y, pixel)

        self.refresh_display(True)
        self.frames_drawn += 1

    def set_pixel(self, x, y, colour):  # pylint: disable=unused-argument
        pass

    def refresh_display(self, content_changed=False):
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
