import pytest

from hyperbench.outliers import modified_zscores, num_outliers

NORMAL_SAMPLE = [
    2.33269488,
    1.42195907,
    -0.57527698,
    -0.31293437,
    2.2948158,
    0.75813273,
    -1.0712388,
    -0.96394741,
    -1.15897446,
    1.10976285,
]


def test_no_outliers_in_small_samples():
    assert num_outliers([]) == 0
    assert num_outliers([50.0]) == 0
    assert num_outliers([1000.0, 0.0]) == 0


def test_no_outliers_in_low_variance_sample():
    assert num_outliers([-0.2, 0.0, 0.2]) == 0


def test_single_outlier():
    assert num_outliers([-0.2, 0.0, 0.2, 4.0]) == 1
    assert num_outliers([0.5, 0.30, 0.29, 0.31, 0.30]) == 1


def test_normal_sample_has_no_outliers():
    assert num_outliers(NORMAL_SAMPLE) == 0


def test_two_added_outliers():
    assert num_outliers(NORMAL_SAMPLE + [20.0, -500.0]) == 2


def test_detect_outliers_if_mad_becomes_zero():
    assert num_outliers([10.0] * 7 + [100.0]) == 1
    assert num_outliers([10.0] * 7 + [100.0, 100.0]) == 2


def test_zscores_are_zero_at_median():
    scores = modified_zscores([1.0, 2.0, 3.0])
    assert scores[1] == 0.0
    assert scores[0] == -scores[2]


def test_zscores_reject_empty_sample():
    with pytest.raises(ValueError):
        modified_zscores([])