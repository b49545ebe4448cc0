# chromakit

Building blocks for chroma-based audio fingerprinting, in pure Python with no
dependencies.

## What it provides

- `chromakit.utils`: `prepare_hamming_window`, `apply_window`,
  `euclidean_norm`, `normalize_vector`, `gray_code`, `index_to_freq`,
  `freq_to_index`, `freq_to_bark`, `round_half_away`, `is_nan`,
  `count_set_bits` and `hamming_distance` (both over a bit width that
  defaults to 32).
- `chromakit.quantizer.Quantizer`: three ascending thresholds `t0`, `t1`,
  `t2`; `quantize(value)` returns a level from 0 to 3. Thresholds out of
  order raise `ValueError`.
- `chromakit.filter`: the six rectangular filter shapes (`filter0` …
  `filter5`), the comparators `subtract` and `subtract_log`, and a `Filter`
  dataclass (`type`, `y`, `height`, `width`) whose `apply(image, x)` runs the
  chosen shape with `subtract_log`. An unknown `type` gives `0.0`; a width
  or height below 1 raises `ValueError`.
- `chromakit.classifier.Classifier`: a `Filter` and a `Quantizer` together;
  `classify(image, offset)` returns the quantized response.
- `chromakit.image.Image`: rows of a fixed number of columns, with
  `add_row`, `row(i)`, indexing and `len()`.
- `chromakit.moving_average.MovingAverage`: the integer average of the last
  `size` values added, truncated toward zero.
- `chromakit.configuration`: the `Algorithm` enum (`TEST1` … `TEST5`),
  `FingerprinterConfiguration` and `create_fingerprinter_configuration`,
  which returns a fresh preset or raises `ValueError` for an unknown id. A
  configuration carries classifiers, chroma filter coefficients, frame size
  and overlap, interpolation and silence settings, and computes
  `max_filter_width()`, `item_duration()`, `item_duration_in_seconds()`,
  `delay()` and `delay_in_seconds()` at a sample rate of 11025 Hz.
- `chromakit.audio_slicer.AudioSlicer`: cuts a sample stream that arrives in
  chunks into overlapping frames of `size` samples, `increment` apart.
- `chromakit.chroma_normalizer`: the abstract consumers `AudioConsumer`,
  `FeatureVectorConsumer` and `FFTFrameConsumer`, and `ChromaNormalizer`,
  which scales each feature vector to unit length (vectors with a norm below
  0.01 become zeros) and passes it to the next consumer.

The filters read an integral image through its `area(x1, y1, x2, y2)`
method; the package does not include one, so pass any object that has it.

## What it does not do

The package holds the parts listed above and nothing more. It does not
decode audio files, resample, compute FFTs or chroma features, produce,
compress, encode or compare fingerprints, and it has no command-line tool.

## Installing

```
pip install chromakit
```

## Examples

Quantizing a value:

```python
from chromakit.quantizer import Quantizer

q = Quantizer(0.0, 0.5, 1.0)
q.quantize(0.7)   # 2
```

Getting a preset configuration:

```python
from chromakit.configuration import Algorithm, create_fingerprinter_configuration

config = create_fingerprinter_configuration(Algorithm.TEST2)
config.item_duration()      # 1366 samples between items
config.delay_in_seconds()   # latency before the first item appears
```

Slicing a sample stream into overlapping frames. The consumer receives each
frame in two parts, samples kept from earlier calls and samples from this
call:

```python
from chromakit.audio_slicer import AudioSlicer

frames = []

def collect(kept, new):
    frames.append(list(kept) + list(new))

slicer = AudioSlicer(4, 2)
slicer.process([0, 1, 2], collect)
slicer.process([3, 4, 5, 6], collect)
# frames == [[0, 1, 2, 3], [2, 3, 4, 5]]
```

## Running the tests

```
pip install -e ".[test]"
pytest
```