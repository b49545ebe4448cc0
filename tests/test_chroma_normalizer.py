import math

import pytest

from chromakit.chroma_normalizer import (
    AudioConsumer,
    ChromaNormalizer,
    FeatureVectorConsumer,
    FFTFrameConsumer,
)


class Collector(FeatureVectorConsumer):
    def __init__(self):
        self.vectors = []

    def consume(self, features):
        self.vectors.append(list(features))


def test_normalizes_to_unit_length():
    collector = Collector()
    normalizer = ChromaNormalizer(collector)
    normalizer.consume([3.0, 4.0])
    assert collector.vectors[0] == pytest.approx([0.6, 0.8])


def test_output_norm_is_one():
    collector = Collector()
    normalizer = ChromaNormalizer(collector)
    features = [0.1, 2.0, 0.5, 7.0, 1.25, 0.0, 3.0, 0.7, 0.2, 0.9, 4.4, 0.05]
    normalizer.consume(features)
    out = collector.vectors[0]
    assert len(out) == len(features)
    assert math.sqrt(sum(v * v for v in out)) == pytest.approx(1.0)
    ratios = [o / f for o, f in zip(out, features) if f]
    assert all(r == pytest.approx(ratios[0]) for r in ratios)


def test_small_vector_becomes_zero():
    collector = Collector()
    ChromaNormalizer(collector).consume([0.001, 0.002, 0.003])
    assert collector.vectors[0] == [0.0, 0.0, 0.0]


def test_zero_vector_stays_zero():
    collector = Collector()
    ChromaNormalizer(collector).consume([0.0] * 12)
    assert collector.vectors[0] == [0.0] * 12


def test_reset_keeps_forwarding():
    collector = Collector()
    normalizer = ChromaNormalizer(collector)
    normalizer.consume([1.0, 0.0])
    normalizer.reset()
    normalizer.consume([0.0, 2.0])
    assert collector.vectors == [[1.0, 0.0], [0.0, 1.0]]


@pytest.mark.parametrize("cls", [AudioConsumer, FeatureVectorConsumer, FFTFrameConsumer])
def test_interfaces_are_abstract(cls):
    with pytest.raises(TypeError):
        cls()