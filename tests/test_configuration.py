import pytest

from chromakit.classifier import Classifier
from chromakit.configuration import (
    DEFAULT_SAMPLE_RATE,
    Algorithm,
    FingerprinterConfiguration,
    create_fingerprinter_configuration,
)
from chromakit.filter import Filter
from chromakit.quantizer import Quantizer


def test_test1_first_classifier():
    config = create_fingerprinter_configuration(Algorithm.TEST1)
    assert len(config.classifiers) == 16
    assert config.classifiers[0] == Classifier(
        Filter(0, 0, 3, 15), Quantizer(2.10543, 2.45354, 2.69414)
    )


def test_test1_frame_parameters():
    config = create_fingerprinter_configuration(Algorithm.TEST1)
    assert config.frame_size == 4096
    assert config.frame_overlap == 4096 - 4096 // 3
    assert config.interpolate is False
    assert config.filter_coefficients == (0.25, 0.75, 1.0, 0.75, 0.25)


def test_max_filter_width_is_widest_classifier():
    config = create_fingerprinter_configuration(Algorithm.TEST1)
    assert config.max_filter_width() == 16
    assert config.max_filter_width() == max(c.filter.width for c in config.classifiers)


def test_test2_and_test3_share_classifiers():
    c2 = create_fingerprinter_configuration(Algorithm.TEST2)
    c3 = create_fingerprinter_configuration(Algorithm.TEST3)
    assert c2.classifiers == c3.classifiers
    assert c3.interpolate is True
    assert c3.frame_overlap == 0


def test_test4_removes_silence():
    c2 = create_fingerprinter_configuration(Algorithm.TEST2)
    c4 = create_fingerprinter_configuration(Algorithm.TEST4)
    assert c4.remove_silence is True
    assert c4.silence_threshold == 50
    assert c4.classifiers == c2.classifiers
    assert c4.frame_size == c2.frame_size
    assert c2.remove_silence is False


def test_test5_halves_frame():
    c5 = create_fingerprinter_configuration(Algorithm.TEST5)
    assert c5.frame_size == 4096 // 2
    assert c5.frame_overlap == 4096 // 2 - 4096 // 4


def test_sample_rate_and_durations():
    config = create_fingerprinter_configuration(Algorithm.TEST2)
    assert config.sample_rate == 11025 == DEFAULT_SAMPLE_RATE
    assert config.item_duration() == config.frame_size - config.frame_overlap
    assert config.item_duration_in_seconds() == pytest.approx(
        config.item_duration() / config.sample_rate
    )


def test_delay_formula():
    config = create_fingerprinter_configuration(Algorithm.TEST2)
    expected = (
        (len(config.filter_coefficients) - 1) + (config.max_filter_width() - 1)
    ) * config.item_duration() + config.frame_overlap
    assert config.delay() == expected
    assert config.delay_in_seconds() == pytest.approx(config.delay() / config.sample_rate)


def test_accepts_plain_integers():
    assert create_fingerprinter_configuration(1) == create_fingerprinter_configuration(
        Algorithm.TEST2
    )


def test_returns_independent_instances():
    a = create_fingerprinter_configuration(Algorithm.TEST2)
    b = create_fingerprinter_configuration(Algorithm.TEST2)
    a.silence_threshold = 7
    assert b.silence_threshold == 0


@pytest.mark.parametrize("algorithm", [-1, 5, 99])
def test_unknown_algorithm(algorithm):
    with pytest.raises(ValueError):
        create_fingerprinter_configuration(algorithm)


def test_empty_configuration_max_width():
    assert FingerprinterConfiguration().max_filter_width() == 0