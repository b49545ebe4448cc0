"""Numeric helpers shared by the fingerprinting pipeline."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

_GRAY_CODES = (0, 1, 3, 2)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, with halves rounded away from zero."""
    if x >= 0.0:
        return float(math.floor(x + 0.5))
    return float(math.ceil(x - 0.5))


def prepare_hamming_window(size: int, scale: float = 1.0) -> list[float]:
    """Return a Hamming window of ``size`` coefficients multiplied by ``scale``."""
    if size < 1:
        raise ValueError("window size must be positive")
    if size == 1:
        # A single-point window has no span to spread the cosine over.
        return [scale * (0.54 - 0.46)]
    step = 2.0 * math.pi / (size - 1)
    return [scale * (0.54 - 0.46 * math.cos(i * step)) for i in range(size)]


def apply_window(samples: Iterable[float], window: Iterable[float]) -> list[float]:
    """Multiply each sample by the matching window coefficient."""
    return [sample * coefficient for sample, coefficient in zip(samples, window)]


def euclidean_norm(values: Iterable[float]) -> float:
    """Return the Euclidean (L2) norm of ``values``."""
    squares = sum(v * v for v in values)
    return math.sqrt(squares) if squares > 0 else 0.0


def normalize_vector(
    values: Sequence[float],
    norm_func: Callable[[Sequence[float]], float] = euclidean_norm,
    threshold: float = 0.01,
) -> list[float]:
    """Divide ``values`` by their norm; return zeros if the norm is below ``threshold``."""
    norm = norm_func(values)
    if norm < threshold:
        return [0.0] * len(values)
    return [v / norm for v in values]


def gray_code(i: int) -> int:
    """Return the two-bit Gray code of ``i`` (0..3)."""
    if not 0 <= i < len(_GRAY_CODES):
        raise ValueError(f"gray code input out of range: {i}")
    return _GRAY_CODES[i]


def index_to_freq(i: int, frame_size: int, sample_rate: int) -> float:
    """Convert an FFT bin index to a frequency in Hz."""
    return float(i) * sample_rate / frame_size


def freq_to_index(freq: float, frame_size: int, sample_rate: int) -> int:
    """Convert a frequency in Hz to the nearest FFT bin index."""
    return int(round_half_away(frame_size * freq / sample_rate))


def freq_to_bark(f: float) -> float:
    """Convert a frequency in Hz to the Bark scale."""
    z = (26.81 * f) / (1960.0 + f) - 0.53
    if z < 2.0:
        z = z + 0.15 * (2.0 - z)
    elif z > 20.1:
        z = z + 0.22 * (z - 20.1)
    return z


def is_nan(value: float) -> bool:
    """Return True if ``value`` is not a number."""
    return value != value


def count_set_bits(value: int, bits: int = 32) -> int:
    """Count set bits of ``value`` viewed as an unsigned integer of ``bits`` width."""
    if bits < 1:
        raise ValueError("bit width must be positive")
    return (value & ((1 << bits) - 1)).bit_count()


def hamming_distance(a: int, b: int, bits: int = 32) -> int:
    """Return the number of differing bits between ``a`` and ``b``."""
    return count_set_bits(a ^ b, bits)