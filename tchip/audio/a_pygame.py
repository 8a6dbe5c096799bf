#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the buzzer as a looping square wave within PyGame / SDL.

The machine only has a buzzer with an 'on' or 'off' status.  The tone is built
from a 1-bit waveform pattern (16 bytes, played back at 'frequency' bits per
second) which has to be stretched lengthways and have its offset moved to fit
in a modern 8-bit PyGame / SDL buffer, but it will retain the shape of a
square wave.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100.0
DEFAULT_VOLUME = 0.1
DEFAULT_PATTERN = b"\x00\xFF" * 8  # 8 square wave cycles
DEFAULT_PATTERN_FREQUENCY = 4000.0


class Audio(AudioBase):
    def __init__(self):
        super().__init__()
        pygame.mixer.pre_init(int(PLAYBACK_FREQUENCY), size=8, channels=1, buffer=512, allowedchanges=0)
        pygame.mixer.init()
        self.sound = pygame.mixer.Sound(buffer=self.resample_pattern(DEFAULT_PATTERN, DEFAULT_PATTERN_FREQUENCY))
        self.sound.set_volume(DEFAULT_VOLUME)

    @staticmethod
    def resample_pattern(pattern, frequency):
        # Stretch the bit-level pattern into an 8-bit PyGame sample
        sample_multiplier = PLAYBACK_FREQUENCY / frequency
        resampled_buffer_size = int(len(pattern) * 8 * sample_multiplier)
        resampled_buffer = bytearray(resampled_buffer_size)

        for resampled_buffer_pos in range(resampled_buffer_size):
            pattern_bit_pos = resampled_buffer_pos / sample_multiplier
            byte = int(pattern_bit_pos / 8.0)
            bit = 7 - int(pattern_bit_pos % 8.0)
            resampled_buffer[resampled_buffer_pos] = ((pattern[byte] >> bit) & 1) * 0xFF

        return bytes(resampled_buffer)

    def enable_buzzer(self, enabled):
        # Play or stop buffer playback.  A sample which is already playing won't be restarted.
        if enabled and not self.buzzer_enabled:
            self.sound.play(-1)
        elif not enabled and self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()

        pygame.mixer.quit()
        super().shutdown()
