"""Tests for seqops/permutation.py"""

import numpy as np
import pytest

from seqops import Permutation, PermutationError, SENTINEL, reorder


class TestConstruction:
    def test_valid(self):
        p = Permutation((2, 0, 1))
        assert len(p) == 3
        assert list(p) == [2, 0, 1]
        assert p[0] == 2

    def test_list_is_normalized_to_tuple(self):
        p = Permutation([1, 0])
        assert p.indices == (1, 0)

    def test_numpy_indices(self):
        p = Permutation(np.array([1, 2, 0]))
        assert p.indices == (1, 2, 0)
        assert all(type(index) is int for index in p.indices)

    @pytest.mark.parametrize("indices", [(0, 0), (1, 2), (-1, 0), (0, 2, 2)])
    def test_invalid(self, indices):
        with pytest.raises(PermutationError):
            Permutation(indices)

    def test_float_indices_rejected(self):
        with pytest.raises(PermutationError, match="not an integer"):
            Permutation((0.9, 1.7))

    def test_float_array_rejected(self):
        with pytest.raises(PermutationError, match="integers"):
            Permutation(np.array([1.0, 0.0]))

    def test_numpy_scalars_normalized(self):
        p = Permutation.from_indices(np.array([1, 0], dtype=np.uint16))
        assert p.indices == (1, 0)
        assert all(type(index) is int for index in p.indices)

    def test_identity(self):
        assert Permutation.identity(4).indices == (0, 1, 2, 3)
        assert Permutation.identity(0).indices == ()
        assert Permutation.identity(5).is_identity()

    def test_identity_negative(self):
        with pytest.raises(ValueError):
            Permutation.identity(-1)

    def test_sorting(self):
        p = Permutation.sorting([5, 4, 3, 2, 0, 1])
        assert p.indices == (4, 5, 3, 2, 1, 0)

    def test_sorting_numpy(self):
        p = Permutation.sorting(np.array([0.5, 0.25]))
        assert p.indices == (1, 0)

    def test_frozen(self):
        p = Permutation((0,))
        with pytest.raises(AttributeError):
            p.indices = (0,)

    def test_equality_and_hash(self):
        assert Permutation((1, 0)) == Permutation([1, 0])
        assert len({Permutation((1, 0)), Permutation([1, 0])}) == 1


class TestAlgebra:
    def test_inverse(self):
        p = Permutation((2, 0, 3, 1))
        assert p.inverse().indices == (1, 3, 0, 2)
        assert p.inverse().inverse() == p

    def test_inverse_undoes_apply(self):
        p = Permutation((3, 0, 4, 1, 2))
        values = list("abcde")
        p.apply(values)
        p.inverse().apply(values)
        assert values == list("abcde")

    def test_cycles(self):
        p = Permutation((1, 0, 2, 4, 5, 3))
        assert p.cycles() == ((0, 1), (2,), (3, 4, 5))

    def test_cycles_single_cycle(self):
        assert Permutation((2, 0, 3, 1)).cycles() == ((0, 2, 3, 1),)

    def test_cycles_empty(self):
        assert Permutation(()).cycles() == ()

    def test_is_identity(self):
        assert not Permutation((1, 0)).is_identity()
        assert Permutation(()).is_identity()


class TestApply:
    def test_apply_matches_reorder(self):
        p = Permutation((2, 0, 3, 1))
        via_wrapper = [1, 2, 3, 4]
        via_function = [1, 2, 3, 4]
        p.apply(via_wrapper)
        reorder(via_function, list(p))
        assert via_wrapper == via_function == [3, 1, 4, 2]

    def test_apply_destructive_keeps_wrapper(self):
        p = Permutation((2, 0, 3, 1))
        values = [1, 2, 3, 4]
        p.apply_destructive(values)
        assert values == [3, 1, 4, 2]
        assert p.indices == (2, 0, 3, 1)
        assert SENTINEL not in p.indices

    def test_apply_length_mismatch(self):
        with pytest.raises(ValueError):
            Permutation((1, 0)).apply([1, 2, 3])

    def test_apply_numpy_rows(self):
        p = Permutation((1, 0))
        values = np.array([[1, 2], [3, 4]])
        p.apply(values)
        assert values.tolist() == [[3, 4], [1, 2]]

    def test_reorder_accepts_permutation(self):
        values = ["a", "b", "c"]
        reorder(values, Permutation((1, 2, 0)))
        assert values == ["b", "c", "a"]

    def test_apply_destructive_numpy_rows(self):
        p = Permutation((2, 0, 1))
        values = np.arange(6).reshape(3, 2)
        p.apply_destructive(values)
        assert values.tolist() == [[4, 5], [0, 1], [2, 3]]

    def test_apply_destructive_length_mismatch(self):
        with pytest.raises(ValueError):
            Permutation((1, 0)).apply_destructive(["a"])


class TestWithoutDebugChecks:
    @pytest.fixture(autouse=True)
    def no_checks(self, monkeypatch):
        monkeypatch.setattr("seqops.permutation.DEBUG_CHECKS", False)
        monkeypatch.setattr("seqops.permute.DEBUG_CHECKS", False)

    def test_apply(self):
        values = [1, 2, 3, 4]
        Permutation((2, 0, 3, 1)).apply(values)
        assert values == [3, 1, 4, 2]

    def test_apply_destructive(self):
        values = [1, 2, 3, 4]
        Permutation((2, 0, 3, 1)).apply_destructive(values)
        assert values == [3, 1, 4, 2]

    def test_construction_still_validates(self):
        with pytest.raises(PermutationError):
            Permutation((0, 0))
