"""Building blocks for chroma-based audio fingerprinting: filters, quantizers, classifiers, presets and stream helpers."""

__version__ = "1.5.1"