"""
Audio feedback for Pong.

SoundBoard is a fire-and-forget sink for MatchEvents. All sounds are
generated procedurally with numpy (retro square/sawtooth beeps), so the
game ships no audio files.

The mixer is only opened on the first SESSION_START event, i.e. the first
time a player starts the match (muted or not), not at import or
construction time.
"""

from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np
import pygame

from pong import config
from pong.logging import get_logger
from pong.models import EventType, MatchEvent

log = get_logger('audio')

SAMPLE_RATE = 22050

# name -> (frequency Hz, duration s, waveform, volume)
TONES: Dict[str, tuple] = {
    'paddle': (440.0, 0.10, 'square', 0.20),
    'wall': (300.0, 0.05, 'square', 0.15),
    'score': (220.0, 0.30, 'sawtooth', 0.30),
    'start': (660.0, 0.10, 'square', 0.20),
}

WIN_NOTES: List[float] = [523.0, 659.0, 784.0, 1047.0]  # C5, E5, G5, C6
WIN_NOTE_SPACING = 0.15  # seconds between note onsets
WIN_NOTE_DURATION = 0.2


def _waveform(phase: np.ndarray, waveform: str) -> np.ndarray:
    """Evaluate a unit-amplitude waveform at the given phase (in cycles)."""
    if waveform == 'square':
        return np.where(np.mod(phase, 1.0) < 0.5, 1.0, -1.0)
    if waveform == 'sawtooth':
        return 2.0 * (phase - np.floor(phase + 0.5))
    if waveform == 'sine':
        return np.sin(2.0 * np.pi * phase)
    raise ValueError(f'Unknown waveform: {waveform}')


def generate_tone(
    frequency: float,
    duration: float,
    waveform: str = 'square',
    volume: float = 0.3,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Generate a mono beep with an exponential fade-out.

    The gain ramps from volume down to 1% of full scale over the duration,
    like a plucked retro beep.

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        waveform: 'square', 'sawtooth' or 'sine'
        volume: Peak gain (0-1)
        sample_rate: Samples per second

    Returns:
        Float array in [-1, 1] of length duration * sample_rate

    Raises:
        ValueError: If duration is not positive
    """
    if duration <= 0:
        raise ValueError(f'Duration must be positive, got {duration}')
    num_samples = max(1, int(sample_rate * duration))
    t = np.arange(num_samples) / sample_rate
    wave = _waveform(frequency * t, waveform)

    if volume > 0.01:
        envelope = volume * np.power(0.01 / volume, t / duration)
    else:
        envelope = np.full(num_samples, volume)
    return wave * envelope


def generate_sequence(
    frequencies: Sequence[float],
    spacing: float,
    duration: float,
    waveform: str = 'square',
    volume: float = 0.25,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Mix tones starting every spacing seconds into one buffer.

    Args:
        frequencies: Note frequencies in order
        spacing: Seconds between note onsets
        duration: Length of each note in seconds

    Returns:
        Float array in [-1, 1]
    """
    offset = int(spacing * sample_rate)
    note_len = max(1, int(duration * sample_rate))
    total = offset * (len(frequencies) - 1) + note_len
    mix = np.zeros(total)

    for i, freq in enumerate(frequencies):
        note = generate_tone(freq, duration, waveform, volume, sample_rate)
        start = i * offset
        mix[start:start + len(note)] += note

    return np.clip(mix, -1.0, 1.0)


def to_pcm16(wave: np.ndarray, channels: int = 2) -> np.ndarray:
    """Convert a float wave to 16-bit PCM with the given channel count."""
    pcm = (np.clip(wave, -1.0, 1.0) * 32767).astype(np.int16)
    if channels == 1:
        return pcm
    return np.ascontiguousarray(np.column_stack([pcm] * channels))


class SoundBoard:
    """Plays retro beeps in response to match events.

    Attributes:
        enabled: Whether sounds are played (M toggles it)
        initialized: Whether the mixer and sounds are ready
        sounds: Name -> pygame Sound, once initialized
    """

    def __init__(self, enabled: bool = config.SOUND_ENABLED, volume: float = config.MASTER_VOLUME):
        """Create the sound board; no audio device is opened yet.

        Args:
            enabled: Start with sound on
            volume: Master volume (0-1)
        """
        self.enabled = enabled
        self.volume = max(0.0, min(1.0, volume))
        self.initialized = False
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}

    def init(self) -> bool:
        """Open the mixer and generate all sounds (once).

        Runs whether or not sound is currently enabled; toggle() only
        mutes. Failure disables audio but never interrupts the match.

        Returns:
            True if audio is ready
        """
        if self.initialized:
            return True

        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            mixer_rate, _, channels = pygame.mixer.get_init()

            for name, (freq, duration, waveform, volume) in TONES.items():
                wave = generate_tone(freq, duration, waveform, volume, mixer_rate)
                self.sounds[name] = self._make_sound(wave, channels)

            jingle = generate_sequence(WIN_NOTES, WIN_NOTE_SPACING, WIN_NOTE_DURATION,
                                       sample_rate=mixer_rate)
            self.sounds['win'] = self._make_sound(jingle, channels)
        except (pygame.error, ValueError) as e:
            log.warning("Audio initialization failed: %s", e)
            self.enabled = False
            self.sounds = {}
            return False

        self.initialized = True
        log.info("Sound initialized (%d sounds)", len(self.sounds))
        return True

    def _make_sound(self, wave: np.ndarray, channels: int) -> pygame.mixer.Sound:
        sound = pygame.sndarray.make_sound(to_pcm16(wave, channels))
        sound.set_volume(self.volume)
        return sound

    def toggle(self) -> bool:
        """Toggle sound on/off.

        Returns:
            New enabled state
        """
        self.enabled = not self.enabled
        log.info("Sound %s", "on" if self.enabled else "off")
        return self.enabled

    def play(self, name: str) -> bool:
        """Play a named sound if audio is on and ready.

        Returns:
            True if a sound was started
        """
        if not self.enabled or not self.initialized:
            return False
        sound = self.sounds.get(name)
        if sound is None:
            return False
        sound.play()
        return True

    def handle_events(self, events: Iterable[MatchEvent]) -> List[str]:
        """Play sounds for match events.

        A point that wins the match plays only the win jingle.

        Args:
            events: Events returned by the match this frame

        Returns:
            Names of the sounds requested, in order
        """
        events = list(events)
        has_win = any(e.type is EventType.WIN for e in events)
        requested: List[str] = []

        for event in events:
            if event.type is EventType.SESSION_START:
                self.init()
                continue

            name = {
                EventType.START: 'start',
                EventType.WALL_HIT: 'wall',
                EventType.PADDLE_HIT: 'paddle',
                EventType.SCORE: None if has_win else 'score',
                EventType.WIN: 'win',
            }.get(event.type)

            if name is not None:
                requested.append(name)
                self.play(name)

        return requested
