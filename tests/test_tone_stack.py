import pytest

from tonestack.tone_stack import Components, ToneStack

MAX_DB = 18.0


def _prepared(fs=48000.0):
    ts = ToneStack()
    ts.prepare(fs)
    return ts


def test_fresh_stack_is_flat():
    ts = ToneStack()
    assert ts.sample_rate == 48000.0
    assert ts.magnitude_at(1000.0) == pytest.approx(1.0)


def test_sample_rate_floor():
    ts = _prepared(1000.0)
    assert ts.sample_rate == 8000.0


def test_default_components():
    c = Components()
    assert (c.rb, c.cb, c.qm, c.shelf_slope) == (100e3, 8e-9, 0.707, 1.0)


def test_centred_pots_are_flat():
    ts = _prepared()
    for f in (30.0, 400.0, 2000.0, 15000.0):
        assert ts.magnitude_at(f) == pytest.approx(1.0, rel=1e-9)


def test_centred_pots_pass_signal_through():
    ts = _prepared()
    block = [0.5, -0.25, 0.125, 0.0, 0.75]
    out = ts.process_block(block)
    assert out == pytest.approx(block, abs=1e-6)


def test_bass_full_boosts_dc():
    ts = _prepared()
    ts.set_pots(1.0, 0.5, 0.5)
    assert ts.magnitude_at(0.0) == pytest.approx(10 ** (MAX_DB / 20), rel=1e-9)


def test_treble_full_cut_at_nyquist():
    ts = _prepared()
    ts.set_pots(0.5, 0.5, 0.0)
    assert ts.magnitude_at(24000.0) == pytest.approx(10 ** (-MAX_DB / 20), rel=1e-9)


def test_pots_are_clamped():
    a, b = _prepared(), _prepared()
    a.set_pots(5.0, -3.0, 2.0)
    b.set_pots(1.0, 0.0, 1.0)
    for f in (50.0, 700.0, 8000.0):
        assert a.magnitude_at(f) == b.magnitude_at(f)


def test_output_trim_scales_response():
    ts = _prepared()
    ts.set_pots(0.2, 0.8, 0.6)
    before = ts.magnitude_at(1000.0)
    ts.set_output_trim_db(-6.0)
    assert ts.output_trim_db == -6.0
    assert ts.magnitude_at(1000.0) / before == pytest.approx(10 ** (-6.0 / 20))


def test_components_move_bass_corner():
    ts = _prepared()
    ts.set_pots(1.0, 0.5, 0.5)
    gain_default = ts.magnitude_at(300.0)
    ts.set_components(Components(cb=80e-9))
    assert ts.components.cb == 80e-9
    assert ts.magnitude_at(300.0) < gain_default


def test_reset_restores_identical_output():
    ts = _prepared()
    ts.set_pots(0.9, 0.3, 0.7)
    block = [1.0] + [0.0] * 63
    first = ts.process_block(block)
    ts.reset()
    assert ts.process_block(block) == first


def test_process_block_preserves_length_and_linearity():
    ts = _prepared()
    ts.set_pots(0.8, 0.2, 0.6)
    block = [0.25, -0.5, 0.125, 0.0] * 8
    out = ts.process_block(block)
    ts.reset()
    doubled = ts.process_block([2 * x for x in block])
    assert len(out) == len(block)
    assert doubled == pytest.approx([2 * y for y in out], abs=1e-6)