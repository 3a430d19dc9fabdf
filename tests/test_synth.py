import pytest

from superseq.synth import Envelope, EnvelopeType, Lfo, LfoShape, Sample, Voice


def test_envelope_type_coerced_from_int():
    env = Envelope(type=1, attack=0.1, decay=0.2, sustain_level=0.5, release=0.3)
    assert env.type is EnvelopeType.ADSR
    assert env.sustain_level == 0.5


def test_envelope_rejects_unknown_type():
    with pytest.raises(ValueError):
        Envelope(type=7)


def test_lfo_shape_coerced_from_int():
    assert Lfo(shape=4).shape is LfoShape.REVERSE_SAW
    assert Lfo(shape=5).shape is LfoShape.RANDOM


def test_lfo_defaults_disabled_triangle():
    lfo = Lfo()
    assert lfo.shape is LfoShape.TRIANGLE
    assert lfo.enabled is False
    assert lfo.freq == 0.0


def test_lfo_negative_frequency_rejected():
    with pytest.raises(ValueError):
        Lfo(freq=-1.0)


@pytest.mark.parametrize("divisor", [1, 2, 4, 8])
def test_sample_accepts_documented_divisors(divisor):
    assert Sample(sample_rate=divisor).sample_rate == divisor


@pytest.mark.parametrize("divisor", [0, 3, 16, -1])
def test_sample_rejects_other_divisors(divisor):
    with pytest.raises(ValueError):
        Sample(sample_rate=divisor)


def test_voice_defaults_are_independent():
    first = Voice()
    second = Voice()
    first.sample.loop = True
    assert second.sample.loop is False
    assert first.output == 0


def test_voice_negative_output_rejected():
    with pytest.raises(ValueError):
        Voice(output=-2)