import pytest

from warpgrid.audio import (AMBIENT_TONE, EFFECTS, SAMPLE_RATE, MixerAudio, render_effect,
                            render_loop, to_pcm16, waveform)


@pytest.mark.parametrize("kind", ["sine", "square", "sawtooth", "triangle"])
def test_waveforms_stay_in_unit_range(kind):
    values = [waveform(kind, i / 64) for i in range(64)]
    assert max(values) <= 1.0 and min(values) >= -1.0


def test_unknown_waveform_is_rejected():
    with pytest.raises(ValueError):
        waveform("noise", 0.0)


def test_effect_length_follows_longest_voice_and_decays():
    samples = render_effect(EFFECTS["gameover"])
    assert len(samples) == int(0.5 * SAMPLE_RATE)
    head = max(abs(s) for s in samples[:200])
    tail = max(abs(s) for s in samples[-200:])
    assert tail < head * 0.01


def test_ambient_loop_is_quiet():
    freq, kind, volume = AMBIENT_TONE
    samples = render_loop(freq, kind, volume, sample_rate=8000)
    assert len(samples) == 8000
    assert max(abs(s) for s in samples) <= volume


def test_pcm16_packs_and_clips():
    data = to_pcm16([0.0, 2.0, -2.0], channels=2)
    assert len(data) == 3 * 2 * 2
    assert data[4:6] == (32767).to_bytes(2, "little", signed=True)


def test_mixer_audio_is_silent_without_an_initialized_mixer():
    audio = MixerAudio()
    if audio.enabled:
        pytest.skip("mixer already initialized in this process")
    audio.play_effect("eat")
    audio.start_ambient()
    audio.stop_ambient()
