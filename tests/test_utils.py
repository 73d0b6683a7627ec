import numpy as np
import pytest

from matrixcache.utils import as_matrix, empty_matrix, frozen_copy, has_missing_values


def test_empty_matrix_is_zero_by_zero():
    m = empty_matrix()
    assert m.shape == (0, 0)
    assert m.dtype == np.float64


def test_as_matrix_keeps_integer_dtype():
    m = as_matrix(np.array([[1, 2], [3, 4]], dtype=np.int64))
    assert m.dtype == np.int64
    np.testing.assert_array_equal(m, [[1, 2], [3, 4]])


def test_as_matrix_keeps_complex_dtype():
    m = as_matrix([[1 + 1j, 0], [0, 1]])
    assert m.dtype.kind == "c"


def test_as_matrix_converts_booleans_to_float():
    m = as_matrix([[True, False], [False, True]])
    assert m.dtype == np.float64
    np.testing.assert_array_equal(m, np.eye(2))


def test_as_matrix_turns_none_into_nan():
    m = as_matrix([[1.0, None], [3.0, 4.0]])
    assert np.isnan(m[0, 1])
    assert has_missing_values(m)


def test_as_matrix_rejects_vectors():
    with pytest.raises(ValueError, match="two-dimensional"):
        as_matrix([1.0, 2.0, 3.0])


def test_as_matrix_rejects_non_numeric():
    with pytest.raises(ValueError, match="numeric matrix"):
        as_matrix([["a", "b"], ["c", "d"]])


def test_frozen_copy_is_read_only_and_detached():
    source = np.array([[1.0, 2.0], [3.0, 4.0]])
    frozen = frozen_copy(source)

    assert not frozen.flags.writeable
    with pytest.raises(ValueError):
        frozen[0, 0] = 10.0

    source[0, 0] = 99.0
    assert frozen[0, 0] == 1.0


def test_has_missing_values_on_clean_matrix():
    assert not has_missing_values(np.eye(3))
    assert not has_missing_values(empty_matrix())


def test_has_missing_values_on_integer_matrix():
    assert not has_missing_values(np.array([[1, 2], [3, 4]], dtype=np.int64))


def test_has_missing_values_on_complex_matrix():
    assert has_missing_values(np.array([[complex(np.nan, 0), 0], [0, 1]]))
