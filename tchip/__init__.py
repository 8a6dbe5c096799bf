#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the emulator, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_KEYMAP
from .cpu import CPU
from .host import Host
from .hostio import Loader
from .ram import RAMError


class StartupError(Exception):
    pass


def load_plugins(opt_renderer, mute_audio):
    # Returns the Renderer, Inputs and Audio classes to use.  If necessary, try PyGame first, then Curses.
    auto_select_renderer = opt_renderer is None

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            # PyGame can handle proper waveforms
            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

            return Renderer, Inputs, Audio

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

            # Terminals can handle fixed-length beeps, but not sampled sound
            if mute_audio or mute_audio is None:
                from .audio.a_null import Audio
            else:
                from .audio.a_curses import Audio

            return Renderer, Inputs, Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

        return Renderer, Inputs, Audio

    raise StartupError("Unknown renderer '{}'.".format(opt_renderer))


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    Renderer, Inputs, Audio = load_plugins(args["renderer"], args["mute"])

    # Create a new CPU.  It boots at the program start address with the system font already in RAM.
    cpu = CPU(trace=args["debug"], strict=args["strict"])

    # Read ROM binary and write it into RAM
    try:
        cpu.load_program(Loader().load_binary(args["filename"]))
    except OSError as e:
        raise StartupError("Unable to read '{}': {}".format(args["filename"], e.strerror)) from None
    except RAMError:
        raise StartupError("'{}' is too large to fit in memory.".format(args["filename"])) from None

    # Set up the host systems.  Inputs are linked to the chosen renderer in case it provides inputs too.
    renderer = Renderer(scale=args["scale"])
    audio = None
    inputs = None

    try:
        inputs = Inputs(args["keymap"] or DEFAULT_KEYMAP, renderer)
        audio = Audio()
        Host(cpu, renderer, inputs, audio, clock_speed=args["clock_speed"]).run()
    finally:
        # The CPU has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        if audio is not None:
            audio.shutdown()

        if inputs is not None:
            inputs.shutdown()

        renderer.shutdown()
