import logging

import numpy as np
import pygame

from config import DIE_TONE, EAT_TONE, SAMPLE_RATE, SFX_VOLUME, START_TONE

logger = logging.getLogger(__name__)


def sine_samples(freq=440, duration=0.12, volume=0.2, sample_rate=SAMPLE_RATE):
    """Stereo int16 samples of an enveloped sine tone."""
    count = int(sample_rate * duration)
    t = np.linspace(0, duration, count, False)
    wave = np.sin(2 * np.pi * freq * t)
    # Quick attack and release so the tone does not click
    env = np.ones_like(wave)
    attack = min(int(0.01 * sample_rate), count)
    release = min(int(0.03 * sample_rate), count - attack)
    if attack:
        env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] = np.linspace(1, 0, release)
    wave = wave * env * volume
    wave = (wave * (2**15 - 1)).astype(np.int16)
    return np.column_stack([wave, wave])


def sweep_samples(start_freq, end_freq, duration, volume=0.2, sample_rate=SAMPLE_RATE):
    """Stereo int16 samples of a linear pitch sweep, used for the death sound."""
    count = int(sample_rate * duration)
    freq = np.linspace(start_freq, end_freq, count)
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    wave = np.sin(phase) * np.linspace(1, 0, count) * volume
    wave = (wave * (2**15 - 1)).astype(np.int16)
    return np.column_stack([wave, wave])


class SoundBoard:
    """Named sound effects; silent when no mixer is available."""

    def __init__(self, volume=SFX_VOLUME):
        self.sounds = {}
        self.muted = False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, channels=2)
            self.sounds["start"] = pygame.sndarray.make_sound(sine_samples(*START_TONE, volume))
            self.sounds["eat"] = pygame.sndarray.make_sound(sine_samples(*EAT_TONE, volume))
            die_freq, die_duration = DIE_TONE
            self.sounds["die"] = pygame.sndarray.make_sound(
                sweep_samples(die_freq * 2, die_freq, die_duration, volume))
        except (pygame.error, ValueError) as exc:
            logger.warning("Audio unavailable, running silent: %s", exc)
            self.sounds = {}

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self, name):
        if self.muted or name not in self.sounds:
            return
        self.sounds[name].play()
