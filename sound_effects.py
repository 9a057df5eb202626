"""Tiny synthesized sound effects, so the game ships without audio files."""
import math
from array import array

import pygame

SAMPLE_RATE = 44100


def make_tone(freqs, duration=0.15, volume=0.4):
    """Build a mono Sound from a short sequence of frequencies (a mini arpeggio)."""
    length = int(SAMPLE_RATE * max(0.05, duration))
    per_note = max(1, length // len(freqs))
    attack = int(0.01 * SAMPLE_RATE)
    release = int(0.02 * SAMPLE_RATE)
    buf = array('h')
    for i in range(length):
        freq = freqs[min(i // per_note, len(freqs) - 1)]
        t = i / SAMPLE_RATE
        sample = math.sin(2.0 * math.pi * freq * t) + 0.3 * math.sin(2.0 * math.pi * freq * 2 * t)
        if i < attack:
            env = i / attack
        elif i > length - release:
            env = (length - i) / release
        else:
            env = 0.85
        val = int(sample / 1.3 * env * volume * 32767)
        buf.append(max(-32768, min(32767, val)))
    return pygame.mixer.Sound(buffer=buf)


class SoundBoard:
    """Swish/miss/buzzer effects. Silent if the mixer can't start."""

    def __init__(self, enabled=True):
        self.sounds = {}
        if not enabled:
            return
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            print(f"sound disabled: {e}")
            return
        self.sounds = {
            'swish': make_tone([660, 880, 1320], duration=0.25),
            'miss': make_tone([220, 160], duration=0.25),
            'buzzer': make_tone([110], duration=0.8, volume=0.5),
        }

    def play(self, name):
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()
