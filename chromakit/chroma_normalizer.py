"""Consumer interfaces of the pipeline and the chroma vector normalizer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .utils import euclidean_norm, normalize_vector

FFTFrame = list[float]


class AudioConsumer(ABC):
    """Receives blocks of 16-bit audio samples."""

    @abstractmethod
    def consume(self, samples: Sequence[int]) -> None:
        ...


class FeatureVectorConsumer(ABC):
    """Receives feature vectors, one per frame."""

    @abstractmethod
    def consume(self, features: Sequence[float]) -> None:
        ...


class FFTFrameConsumer(ABC):
    """Receives magnitude spectra, one per frame."""

    @abstractmethod
    def consume(self, frame: Sequence[float]) -> None:
        ...


class ChromaNormalizer(FeatureVectorConsumer):
    """Scales each vector to unit Euclidean length before passing it on."""

    def __init__(self, consumer: FeatureVectorConsumer) -> None:
        self._consumer = consumer
        self._frames = 0

    @property
    def frames(self) -> int:
        """Number of vectors passed on since creation or the last reset."""
        return self._frames

    def reset(self) -> None:
        """Start counting passed-on vectors from zero again."""
        self._frames = 0

    def consume(self, features: Sequence[float]) -> None:
        """Normalize ``features``; vectors with a norm under 0.01 become zeros."""
        self._consumer.consume(normalize_vector(features, euclidean_norm, 0.01))
        self._frames += 1