"""A filter paired with a quantizer, producing two-bit codes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .filter import Filter, IntegralImage
from .quantizer import Quantizer


@dataclass
class Classifier:
    """Applies a filter to an integral image and quantizes the response."""

    filter: Filter = field(default_factory=Filter)
    quantizer: Quantizer = field(default_factory=Quantizer)

    def classify(self, image: IntegralImage, offset: int) -> int:
        """Return the quantized filter response (0..3) at ``offset``."""
        return self.quantizer.quantize(self.filter.apply(image, offset))

    def __str__(self) -> str:
        return f"Classifier({self.filter}, {self.quantizer})"