import pytest

from uzemie.array import Array, CompactMatrix, Dimension


def test_dimension_equality():
    assert Dimension(2, 5) == Dimension(2, 5)
    assert Dimension(2, 5) != Dimension(1, 5)
    assert Dimension(2, 5) != Dimension(2, 4)


def test_dimension_rejects_negative_size():
    with pytest.raises(ValueError):
        Dimension(0, -1)


def test_array_from_size_has_zero_base():
    array = Array(5)
    assert len(array) == 5
    assert array.base() == 0
    assert array.is_empty() is False


def test_array_set_and_access_with_base():
    array = Array(Dimension(-3, 4))
    for index in range(-3, 1):
        array.set(index * 10, index)
    assert [array.access(i) for i in range(-3, 1)] == [-30, -20, -10, 0]
    assert list(array) == [-30, -20, -10, 0]


@pytest.mark.parametrize("index", [-4, 1, 100])
def test_array_access_out_of_range(index):
    array = Array(Dimension(-3, 4))
    with pytest.raises(IndexError):
        array.access(index)
    with pytest.raises(IndexError):
        array.set(1, index)


def test_array_cannot_be_cleared():
    array = Array(3)
    with pytest.raises(TypeError):
        array.clear()
    assert len(array) == 3


def test_array_assign_copies_and_is_equal():
    source = Array(Dimension(1, 3))
    for index, value in zip(range(1, 4), "abc"):
        source.set(value, index)
    target = Array(Dimension(1, 3))
    target.assign(source)
    assert target.equals(source)
    assert list(target) == ["a", "b", "c"]
    source.set("z", 1)
    assert target.access(1) == "a"
    assert not target.equals(source)


def test_array_assign_rejects_different_dimension():
    with pytest.raises(ValueError):
        Array(Dimension(0, 3)).assign(Array(Dimension(1, 3)))
    with pytest.raises(ValueError):
        Array(3).assign(Array(4))


def test_array_equals_requires_same_base():
    first = Array(Dimension(0, 2))
    second = Array(Dimension(5, 2))
    assert not first.equals(second)
    assert not first.equals("not an array")


def test_array_copy_is_independent():
    array = Array(2)
    array.set(7, 0)
    duplicate = array.copy()
    assert duplicate.equals(array)
    duplicate.set(8, 0)
    assert array.access(0) == 7


def test_matrix_size_and_dimensions():
    matrix = CompactMatrix(Dimension(1, 2), Dimension(-1, 3))
    assert len(matrix) == 6
    assert matrix.dimension1() == Dimension(1, 2)
    assert matrix.dimension2() == Dimension(-1, 3)
    assert matrix.is_empty() is False


def test_matrix_cells_are_independent():
    matrix = CompactMatrix(Dimension(1, 2), Dimension(-1, 3))
    cells = [(i, j) for i in (1, 2) for j in (-1, 0, 1)]
    for cell in cells:
        matrix.set(cell, *cell)
    assert [matrix.access(*cell) for cell in cells] == cells


def test_matrix_out_of_range():
    matrix = CompactMatrix(2, 3)
    with pytest.raises(IndexError):
        matrix.access(2, 0)
    with pytest.raises(IndexError):
        matrix.set(1, 0, 3)
    with pytest.raises(IndexError):
        matrix.access(-1, 0)


def test_matrix_cannot_be_cleared():
    with pytest.raises(TypeError):
        CompactMatrix(1, 1).clear()


def test_matrix_assign_and_equals():
    source = CompactMatrix(2, 2)
    source.set("x", 1, 1)
    target = CompactMatrix(2, 2).assign(source)
    assert target.equals(source)
    assert target.access(1, 1) == "x"
    with pytest.raises(ValueError):
        CompactMatrix(2, 3).assign(source)
    assert not CompactMatrix(2, 3).equals(source)


def test_matrix_copy_is_independent():
    matrix = CompactMatrix(2, 2)
    matrix.set(1, 0, 0)
    duplicate = matrix.copy()
    duplicate.set(2, 0, 0)
    assert matrix.access(0, 0) == 1
    assert not duplicate.equals(matrix)