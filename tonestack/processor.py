"""Multi-channel audio processor driving one tone stack per channel."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tonestack.tone_stack import Components, ToneStack

PROCESSING_COMPONENTS = Components(
    rb=100e3, cb=16e-9,
    rm=22e3, cm=10e-9,
    rt=250e3, ct=220e-12,
    qm=0.9, shelf_slope=1.0,
)


@dataclass
class FloatParameter:
    """A named float parameter bounded to a range."""

    id: str
    name: str
    minimum: float
    maximum: float
    default: float
    value: float = field(init=False)

    def __post_init__(self) -> None:
        self.value = self.default

    def set(self, value: float) -> None:
        """Store a value, clamped to the parameter range."""
        self.value = min(max(float(value), self.minimum), self.maximum)


def is_buses_layout_supported(input_channels: int, output_channels: int) -> bool:
    """Mono or stereo output only, with input matching output."""
    if output_channels not in (1, 2):
        return False
    return output_channels == input_channels


class ToneStackProcessor:
    """Holds bass/mid/treble parameters and processes channel blocks."""

    tail_length_seconds = 0.0

    def __init__(self, num_input_channels: int = 2, num_output_channels: int = 2) -> None:
        self.num_input_channels = num_input_channels
        self.num_output_channels = num_output_channels
        self.parameters = {
            p.id: p for p in (
                FloatParameter("treble", "Treble", 0.0, 1.0, 0.5),
                FloatParameter("mid", "Mid", 0.0, 1.0, 0.5),
                FloatParameter("bass", "Bass", 0.0, 1.0, 0.5),
            )
        }
        self._stacks: list[ToneStack] = []

    def set_parameter(self, name: str, value: float) -> None:
        self.parameters[name].set(value)

    def parameter_value(self, name: str) -> float:
        return self.parameters[name].value

    def _pots(self) -> tuple[float, float, float]:
        return (self.parameter_value("bass"), self.parameter_value("mid"),
                self.parameter_value("treble"))

    def prepare_to_play(self, sample_rate: float, samples_per_block: int) -> None:
        """Create and configure one tone stack per output channel."""
        self._stacks = []
        for _ in range(self.num_output_channels):
            stack = ToneStack()
            stack.prepare(sample_rate)
            stack.set_components(PROCESSING_COMPONENTS)
            stack.set_pots(*self._pots())
            stack.set_output_trim_db(0.0)
            self._stacks.append(stack)

    def release_resources(self) -> None:
        """Playback stopped: clear every channel's filter state, keeping its settings."""
        for stack in self._stacks:
            stack.reset()

    def process_block(self, channels: Sequence[Sequence[float]]) -> list[list[float]]:
        """Process one block per channel and return the processed blocks.

        Channels past the input count are silenced before filtering.
        """
        if not self._stacks:
            raise RuntimeError("prepare_to_play must be called before processing")
        if len(channels) > len(self._stacks):
            raise ValueError(
                f"{len(channels)} channels given, {len(self._stacks)} prepared")
        blocks = [list(ch) for ch in channels]
        for index in range(self.num_input_channels,
                           min(self.num_output_channels, len(blocks))):
            blocks[index] = [0.0] * len(blocks[index])
        pots = self._pots()
        for stack in self._stacks:
            stack.set_pots(*pots)
        return [stack.process_block(block)
                for stack, block in zip(self._stacks, blocks)]