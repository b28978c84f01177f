# tonestack

A three-band tone stack (bass, mid, treble) for audio signals. There is one
biquad filter for each band. Bass is a low shelf, mid is a peaking filter and
treble is a high shelf. The corner frequency of each band is `1 / (2πRC)`,
computed from resistor and capacitor values. The controls therefore behave
like the tone controls on a guitar amplifier.

The package is written in plain Python and has no runtime dependencies.

## Installation

```
pip install .
```

Install the test extra and run the tests:

```
pip install .[test]
pytest
```

## Using the tone stack directly

```python
from tonestack.tone_stack import Components, ToneStack

stack = ToneStack()
stack.prepare(48000.0)
stack.set_components(Components(rb=100e3, cb=16e-9, qm=0.9))
stack.set_pots(bass=0.8, mid=0.3, treble=0.6)  # each 0..1, 0.5 is flat
stack.set_output_trim_db(-3.0)

out = stack.process_block([0.0, 0.5, 1.0, 0.5, 0.0])
print(stack.magnitude_at(100.0))  # linear gain of the whole chain at 100 Hz
```

`Components` is a frozen dataclass. Its fields and their defaults are:

| Field | Default | Meaning |
| --- | --- | --- |
| `rb`, `cb` | 100e3, 8e-9 | resistor and capacitor that set the bass corner |
| `rm`, `cm` | 22e3, 10e-9 | resistor and capacitor that set the mid centre |
| `rt`, `ct` | 250e3, 220e-12 | resistor and capacitor that set the treble corner |
| `shelf_slope` | 1.0 | slope of both shelving filters |
| `qm` | 0.707 | Q of the mid peak (values below 0.1 are treated as 0.1) |

Resistances below 1 Ω are treated as 1 Ω. Capacitances below 1 pF are
treated as 1 pF.

Behaviour of the controls:

- Each pot position maps linearly to a gain from -18 dB to +18 dB. Positions
  outside 0..1 are clamped.
- Corner frequencies are kept between 10 Hz and 0.45 of the Nyquist frequency.
- Sample rates below 8 kHz are raised to 8 kHz.

The stack has these read-only properties: `components` and `output_trim_db`.
`sample_rate` can be read and also assigned. Assigning it redesigns the
filters. `prepare()` sets the sample rate and also clears the filter state.
`reset()` only clears the state.

`process_block()` accepts any iterable of floats and returns a new list. Each
output sample is rounded to single precision.

## Single filters

`tonestack.biquad.Biquad` is one filter section in transposed direct form II.
You can use it on its own:

```python
from tonestack.biquad import Biquad

band = Biquad()
band.set_peaking(fs=48000.0, f0=1000.0, q=0.707, gain_db=6.0)
y = [band.process(x) for x in (1.0, 0.0, 0.0, 0.0)]
print(band.magnitude_at(1000.0, 48000.0))
```

Filter design methods: `set_low_shelf(fs, f0, gain_db, slope)`,
`set_high_shelf(fs, f0, gain_db, slope)` and
`set_peaking(fs, f0, q, gain_db)`.

To set coefficients directly, call `set_coeffs(b0, b1, b2, a0, a1, a2)`. It
normalises every coefficient by `a0`. If `a0` is smaller than 1e-20, 1e-20 is
used instead.

The module also provides three helpers:

- `clamp_freq(f, fs)`
- `pot_to_db(pos, max_boost_cut=18.0)`
- `to_float32(value)`, which rounds to single precision and saturates to
  infinity.

## Multichannel processing

`tonestack.processor.ToneStackProcessor` runs one tone stack on each output
channel. It has three parameters, `"bass"`, `"mid"` and `"treble"`. Each one
ranges from 0 to 1, has a default of 0.5, and is stored as a `FloatParameter`.
Values passed to `set_parameter()` are clamped to the range.

```python
from tonestack.processor import ToneStackProcessor

proc = ToneStackProcessor(num_input_channels=2, num_output_channels=2)
proc.prepare_to_play(44100.0, 512)
proc.set_parameter("treble", 0.9)
left, right = proc.process_block([[0.1] * 512, [0.1] * 512])
print(proc.parameter_value("treble"))
```

`prepare_to_play()` builds the tone stacks using the component values in
`PROCESSING_COMPONENTS`.

On every call, `process_block()` does the following:

- Applies the current parameter values.
- Silences any channels past the input count.
- Returns the processed blocks.

It raises `RuntimeError` if the processor has not been prepared. It raises
`ValueError` if it is given more channels than were prepared.

`release_resources()` clears each channel's filter state and keeps its
settings.

`is_buses_layout_supported(input_channels, output_channels)` returns true
only when the output is mono or stereo and the input channel count matches the
output.

## What this package does not do

This package only processes audio that is already in memory, as lists of
floats. It does not include:

- a graphical editor or knobs
- a way to save or restore parameter state
- audio file or audio device input/output
- a command-line tool