import numpy as np

from gridsnake.audio import SoundBoard, sine_samples, sweep_samples


def test_sine_samples_are_stereo_int16_within_volume():
    samples = sine_samples(freq=440, duration=0.1, volume=0.5, sample_rate=8000)
    assert samples.shape == (800, 2)
    assert samples.dtype == np.int16
    assert np.array_equal(samples[:, 0], samples[:, 1])
    assert np.abs(samples).max() <= int(0.5 * (2**15 - 1))
    # enveloped at both ends
    assert samples[0, 0] == 0
    assert abs(int(samples[-1, 0])) < 50


def test_very_short_tone_does_not_break_envelope():
    samples = sine_samples(freq=440, duration=0.002, sample_rate=8000)
    assert samples.shape == (16, 2)


def test_sweep_fades_out():
    samples = sweep_samples(440, 220, 0.2, volume=0.4, sample_rate=8000)
    assert samples.shape == (1600, 2)
    head = np.abs(samples[:400, 0]).max()
    tail = np.abs(samples[-400:, 0]).max()
    assert tail < head


def test_muted_board_plays_nothing():
    board = SoundBoard()
    played = []

    class FakeSound:
        def play(self):
            played.append(True)

    board.sounds = {"eat": FakeSound()}
    board.play("eat")
    assert board.toggle_mute() is True
    board.play("eat")
    board.play("missing")
    assert played == [True]
