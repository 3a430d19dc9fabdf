"""Voice, envelope, LFO and sample settings for the sequencer's instruments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

VALID_SAMPLE_RATE_DIVISORS = (1, 2, 4, 8)


class EnvelopeType(IntEnum):
    """Shape of a volume or filter envelope."""

    AD = 0
    ADSR = 1


class LfoShape(IntEnum):
    """Waveform of a low-frequency oscillator."""

    TRIANGLE = 0
    SINE = 1
    SQUARE = 2
    SAW = 3
    REVERSE_SAW = 4
    RANDOM = 5


@dataclass
class Envelope:
    """An AD or ADSR envelope."""

    type: EnvelopeType = EnvelopeType.AD
    attack: float = 0.0
    decay: float = 0.0
    sustain_level: float = 0.0
    release: float = 0.0
    sustain: bool = False

    def __post_init__(self) -> None:
        self.type = EnvelopeType(self.type)


@dataclass
class Lfo:
    """A low-frequency oscillator used for modulation."""

    shape: LfoShape = LfoShape.TRIANGLE
    freq: float = 0.0
    enabled: bool = False

    def __post_init__(self) -> None:
        self.shape = LfoShape(self.shape)
        if self.freq < 0:
            raise ValueError(f"LFO frequency must not be negative: {self.freq}")


@dataclass
class Sample:
    """Playback settings for a sample.

    ``sample_rate`` is a divisor of the base rate: 1 plays at the base rate,
    2 at half, 4 at a quarter and 8 at an eighth. A cross-fade needs two mixer
    channels, so each voice takes two.
    """

    loop: bool = False
    start_point: float = 0.0
    end_point: float = 0.0
    cross_fade: float = 0.0
    sample_rate: int = 1

    def __post_init__(self) -> None:
        if self.sample_rate not in VALID_SAMPLE_RATE_DIVISORS:
            raise ValueError(
                f"sample rate divisor must be one of {VALID_SAMPLE_RATE_DIVISORS}, "
                f"not {self.sample_rate}"
            )


@dataclass
class Voice:
    """A playable voice: a sample, its envelope and its output channel."""

    sample: Sample = field(default_factory=Sample)
    env: Envelope = field(default_factory=Envelope)
    output: int = 0

    def __post_init__(self) -> None:
        if self.output < 0:
            raise ValueError(f"output channel must not be negative: {self.output}")