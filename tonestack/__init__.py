"""Three-band tone stack built from biquad shelving and peaking filters."""

__version__ = "0.1.0"
__all__ = ["biquad", "tone_stack", "processor"]