import pytest

from deepcrawl.heaparray import HeapArray, main


def test_new_array_is_empty():
    arr = HeapArray(4)
    assert len(arr) == 0
    assert arr.capacity == 4


def test_add_last_appends_in_order():
    arr = HeapArray(2)
    for value in (7, 8):
        arr.add_last(value)
    assert len(arr) == 2
    assert [arr.get_element(i) for i in range(2)] == [7, 8]


def test_add_last_grows_capacity():
    arr = HeapArray(2)
    for value in range(5):
        arr.add_last(value)
    assert len(arr) == 5
    assert arr.capacity >= 5
    assert [arr.get_element(i) for i in range(5)] == list(range(5))


def test_zero_capacity_grows_on_append():
    arr = HeapArray(0)
    arr.add_last(9)
    assert arr.get_element(0) == 9
    assert arr.capacity == 1


def test_set_element_overwrites():
    arr = HeapArray(3)
    arr.set_element(1, 42)
    assert arr.get_element(1) == 42
    assert len(arr) == 0


def test_copy_is_independent():
    arr = HeapArray(2)
    arr.add_last(5)
    dup = arr.copy()
    dup.add_last(6)
    dup.set_element(0, 1)
    assert len(arr) == 1
    assert len(dup) == 2
    assert arr.get_element(0) == 5
    assert dup.capacity == arr.capacity


@pytest.mark.parametrize("position", [-1, 3, 10])
def test_out_of_range_access_raises(position):
    arr = HeapArray(3)
    with pytest.raises(IndexError):
        arr.get_element(position)
    with pytest.raises(IndexError):
        arr.set_element(position, 1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        HeapArray(-1)


def test_main_prints_sizes(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["0", "1"]