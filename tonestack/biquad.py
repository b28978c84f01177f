"""Second-order IIR sections and shelving/peaking filter design."""

from __future__ import annotations

import cmath
import math
import struct
from dataclasses import dataclass

_MIN_A0 = 1e-20


def to_float32(value: float) -> float:
    """Round a Python float to single precision, saturating to infinity."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def clamp_freq(f: float, fs: float) -> float:
    """Keep a corner frequency between 10 Hz and 45 % of Nyquist."""
    nyquist = 0.5 * fs
    return min(max(f, 10.0), 0.45 * nyquist)


def pot_to_db(pos: float, max_boost_cut: float = 18.0) -> float:
    """Map a pot position in [0, 1] to a gain in [-max, +max] dB."""
    return (pos * 2.0 - 1.0) * max_boost_cut


@dataclass
class Biquad:
    """Transposed direct form II biquad with normalised coefficients."""

    b0: float = 1.0
    b1: float = 0.0
    b2: float = 0.0
    a1: float = 0.0
    a2: float = 0.0
    z1: float = 0.0
    z2: float = 0.0

    def process(self, x: float) -> float:
        """Filter one sample and return it in single precision."""
        y = self.b0 * x + self.z1
        self.z1 = self.b1 * x - self.a1 * y + self.z2
        self.z2 = self.b2 * x - self.a2 * y
        return to_float32(y)

    def set_coeffs(self, b0, b1, b2, a0, a1, a2) -> None:
        """Set coefficients, normalising by a0 (guarded against zero)."""
        inv_a0 = 1.0 / (_MIN_A0 if abs(a0) < _MIN_A0 else a0)
        self.b0 = b0 * inv_a0
        self.b1 = b1 * inv_a0
        self.b2 = b2 * inv_a0
        self.a1 = a1 * inv_a0
        self.a2 = a2 * inv_a0

    def reset(self) -> None:
        """Clear the filter state."""
        self.z1 = 0.0
        self.z2 = 0.0

    @staticmethod
    def _shelf_terms(fs, f0, gain_db, slope):
        f0 = clamp_freq(f0, fs)
        a = math.sqrt(10.0 ** (gain_db / 20.0))
        w0 = 2.0 * math.pi * f0 / fs
        cw = math.cos(w0)
        sw = math.sin(w0)
        alpha = sw * 0.5 * math.sqrt((a + 1.0 / a) * (1.0 / slope - 1.0) + 2.0)
        beta = 2.0 * math.sqrt(a) * alpha
        return a, cw, beta

    def set_low_shelf(self, fs, f0, gain_db, slope) -> None:
        """Design a low shelf at f0 with the given gain and slope."""
        a, cw, beta = self._shelf_terms(fs, f0, gain_db, slope)
        self.set_coeffs(
            a * ((a + 1.0) - (a - 1.0) * cw + beta),
            2 * a * ((a - 1.0) - (a + 1.0) * cw),
            a * ((a + 1.0) - (a - 1.0) * cw - beta),
            (a + 1.0) + (a - 1.0) * cw + beta,
            -2 * ((a - 1.0) + (a + 1.0) * cw),
            (a + 1.0) + (a - 1.0) * cw - beta,
        )

    def set_high_shelf(self, fs, f0, gain_db, slope) -> None:
        """Design a high shelf at f0 with the given gain and slope."""
        a, cw, beta = self._shelf_terms(fs, f0, gain_db, slope)
        self.set_coeffs(
            a * ((a + 1.0) + (a - 1.0) * cw + beta),
            -2 * a * ((a - 1.0) + (a + 1.0) * cw),
            a * ((a + 1.0) + (a - 1.0) * cw - beta),
            (a + 1.0) - (a - 1.0) * cw + beta,
            2 * ((a - 1.0) - (a + 1.0) * cw),
            (a + 1.0) - (a - 1.0) * cw - beta,
        )

    def set_peaking(self, fs, f0, q, gain_db) -> None:
        """Design a peaking band at f0; Q is floored at 0.1."""
        f0 = clamp_freq(f0, fs)
        q = max(0.1, q)
        a = 10.0 ** (gain_db / 40.0)
        w0 = 2.0 * math.pi * f0 / fs
        cw = math.cos(w0)
        alpha = math.sin(w0) / (2.0 * q)
        self.set_coeffs(
            1.0 + alpha * a,
            -2.0 * cw,
            1.0 - alpha * a,
            1.0 + alpha / a,
            -2.0 * cw,
            1.0 - alpha / a,
        )

    def magnitude_at(self, freq: float, fs: float) -> float:
        """Linear magnitude of the response at freq for sample rate fs."""
        w = 2.0 * math.pi * freq / fs
        z1 = complex(math.cos(w), -math.sin(w))
        z2 = z1 * z1
        num = self.b0 + self.b1 * z1 + self.b2 * z2
        den = 1.0 + self.a1 * z1 + self.a2 * z2
        return abs(num / den) if den != 0 else cmath.inf.real