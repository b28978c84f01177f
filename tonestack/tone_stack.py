"""Three-band tone stack built from RC-derived shelving and peaking filters."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from tonestack.biquad import Biquad, pot_to_db, to_float32

_MIN_SAMPLE_RATE = 8000.0


@dataclass(frozen=True)
class Components:
    """Resistor/capacitor values that set the band corner frequencies."""

    rb: float = 100e3
    cb: float = 8e-9
    rm: float = 22e3
    cm: float = 10e-9
    rt: float = 250e3
    ct: float = 220e-12
    shelf_slope: float = 1.0
    qm: float = 0.707


def _rc_frequency(r: float, c: float) -> float:
    return 1.0 / (2.0 * math.pi * max(1.0, r) * max(1e-12, c))


def _clamp_unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


class ToneStack:
    """Bass low shelf, mid peak and treble high shelf in series."""

    def __init__(self) -> None:
        self._fs = 48000.0
        self._components = Components()
        self._pot_bass = 0.5
        self._pot_mid = 0.5
        self._pot_treble = 0.5
        self._out_trim_db = 0.0
        self._makeup = 1.0
        self._low = Biquad()
        self._mid = Biquad()
        self._high = Biquad()

    @property
    def sample_rate(self) -> float:
        return self._fs

    @sample_rate.setter
    def sample_rate(self, fs: float) -> None:
        self._fs = max(_MIN_SAMPLE_RATE, fs)
        self._update_filters()

    @property
    def components(self) -> Components:
        return self._components

    @property
    def output_trim_db(self) -> float:
        return self._out_trim_db

    def prepare(self, sample_rate: float) -> None:
        """Set the sample rate and clear the filter state."""
        self.sample_rate = sample_rate
        self.reset()

    def reset(self) -> None:
        for section in (self._low, self._mid, self._high):
            section.reset()

    def set_components(self, components: Components) -> None:
        self._components = components
        self._update_filters()

    def set_pots(self, bass: float, mid: float, treble: float) -> None:
        """Set pot positions, each clamped to [0, 1]."""
        self._pot_bass = _clamp_unit(bass)
        self._pot_mid = _clamp_unit(mid)
        self._pot_treble = _clamp_unit(treble)
        self._update_filters()

    def set_output_trim_db(self, db: float) -> None:
        self._out_trim_db = db
        self._makeup = 10.0 ** (db / 20.0)

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Filter a block of samples and return the processed block."""
        out = []
        for x in samples:
            y = self._low.process(x)
            y = self._mid.process(y)
            y = self._high.process(y)
            out.append(to_float32(y * self._makeup))
        return out

    def magnitude_at(self, freq: float) -> float:
        """Linear magnitude of the whole stack, including trim, at freq."""
        return (self._low.magnitude_at(freq, self._fs)
                * self._mid.magnitude_at(freq, self._fs)
                * self._high.magnitude_at(freq, self._fs)
                * self._makeup)

    def _update_filters(self) -> None:
        c = self._components
        self._low.set_low_shelf(self._fs, _rc_frequency(c.rb, c.cb),
                                pot_to_db(self._pot_bass), c.shelf_slope)
        self._mid.set_peaking(self._fs, _rc_frequency(c.rm, c.cm), c.qm,
                              pot_to_db(self._pot_mid))
        self._high.set_high_shelf(self._fs, _rc_frequency(c.rt, c.ct),
                                  pot_to_db(self._pot_treble), c.shelf_slope)