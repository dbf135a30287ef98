"""
audio.py

Procedural sound: short oscillator blips for game events and one quiet
looping drone while a run is active. Everything is synthesized into
16-bit buffers and played through pygame.mixer; if the mixer is not
available the game simply stays silent.
"""

import logging
import math
import struct
from typing import Dict, List, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# (frequency Hz, waveform, duration s, volume) per oscillator
EFFECTS: Dict[str, List[Tuple[float, str, float, float]]] = {
    "eat": [(440, "square", 0.08, 0.2), (660, "square", 0.08, 0.2)],
    "special": [(880, "sine", 0.15, 0.3), (1000, "sine", 0.15, 0.3)],
    "powerup_activate": [(1200, "sawtooth", 0.2, 0.4), (1500, "sawtooth", 0.2, 0.4)],
    "powerup_end": [(300, "triangle", 0.1, 0.2), (200, "triangle", 0.1, 0.2)],
    "gameover": [(110, "triangle", 0.5, 0.4), (55, "triangle", 0.5, 0.4)],
    "pause": [(220, "sine", 0.2, 0.3)],
}

AMBIENT_TONE = (120, "triangle", 0.05)


def waveform(kind: str, phase: float) -> float:
    """Sample of a unit-amplitude wave at ``phase`` (in cycles)"""
    frac = phase % 1.0
    if kind == "sine":
        return math.sin(2 * math.pi * frac)
    if kind == "square":
        return 1.0 if frac < 0.5 else -1.0
    if kind == "sawtooth":
        return 2.0 * frac - 1.0
    if kind == "triangle":
        return 4.0 * abs(frac - 0.5) - 1.0
    raise ValueError(f"Unknown waveform: {kind}")


def render_effect(voices: List[Tuple[float, str, float, float]],
                  sample_rate: int = SAMPLE_RATE) -> List[float]:
    """
    Mix oscillators that start together. Each decays exponentially from
    its volume down to 0.0001 over its duration.
    """
    length = max(int(duration * sample_rate) for _, _, duration, _ in voices)
    samples = [0.0] * length
    for freq, kind, duration, volume in voices:
        n = int(duration * sample_rate)
        decay = math.log(0.0001 / volume) / max(n, 1)
        for i in range(n):
            gain = volume * math.exp(decay * i)
            samples[i] += waveform(kind, freq * i / sample_rate) * gain
    return samples


def render_loop(freq: float, kind: str, volume: float,
                sample_rate: int = SAMPLE_RATE) -> List[float]:
    """One second of a steady tone; whole periods so it loops cleanly"""
    return [waveform(kind, freq * i / sample_rate) * volume for i in range(sample_rate)]


def to_pcm16(samples: List[float], channels: int = 1) -> bytes:
    frames = bytearray()
    for s in samples:
        v = int(max(-1.0, min(1.0, s)) * 32767)
        frames += struct.pack('<h', v) * channels
    return bytes(frames)


class MixerAudio:
    """Audio sink backed by pygame.mixer"""
    def __init__(self):
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._ambient: Optional[pygame.mixer.Sound] = None
        self._ambient_channel = None
        self.channels = 1
        self.sample_rate = SAMPLE_RATE
        init = pygame.mixer.get_init()
        self.enabled = init is not None
        if init is None:
            logger.warning("Mixer not initialized, audio disabled")
        else:
            self.sample_rate, _, self.channels = init

    def _sound(self, name: str) -> pygame.mixer.Sound:
        if name not in self._sounds:
            samples = render_effect(EFFECTS[name], self.sample_rate)
            self._sounds[name] = pygame.mixer.Sound(buffer=to_pcm16(samples, self.channels))
        return self._sounds[name]

    def play_effect(self, name: str) -> None:
        if not self.enabled or name not in EFFECTS:
            return
        try:
            self._sound(name).play()
        except pygame.error as e:
            logger.debug(f"Could not play effect {name}: {e}")

    def start_ambient(self) -> None:
        if not self.enabled or self._ambient_channel is not None:
            return
        try:
            if self._ambient is None:
                freq, kind, volume = AMBIENT_TONE
                samples = render_loop(freq, kind, volume, self.sample_rate)
                self._ambient = pygame.mixer.Sound(buffer=to_pcm16(samples, self.channels))
            self._ambient_channel = self._ambient.play(loops=-1)
        except pygame.error as e:
            logger.debug(f"Could not start ambient tone: {e}")

    def stop_ambient(self) -> None:
        if self._ambient_channel is None:
            return
        try:
            self._ambient_channel.fadeout(100)
        except pygame.error as e:
            logger.debug(f"Could not stop ambient tone: {e}")
        self._ambient_channel = None
