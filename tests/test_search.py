import pytest

from csi281.search import (
    array_search_speed,
    binary_search,
    linear_search,
    random_int_array,
)


def test_linear_search_int():
    assert linear_search([23, 4, 11, 4, 7, 8], 7) == 4


def test_linear_search_first_of_duplicates():
    assert linear_search([23, 4, 11, 4, 7, 8], 4) == 1


def test_linear_search_float():
    assert linear_search([23.1, 4.0, 11.5, 7.1], 7.1) == 3


def test_linear_search_char():
    assert linear_search(["r", " ", "!", "3"], "r") == 0


def test_linear_search_not_found():
    assert linear_search([23, 4, 11, 4, 7, 45, 82], 345) == -1


def test_binary_search_int():
    assert binary_search([4, 4, 7, 72, 84], 72) == 3


def test_binary_search_float():
    assert binary_search([2.1, 4.0, 11.5, 17.1], 17.1) == 3


def test_binary_search_char():
    assert binary_search(["a", "c", "f", "r"], "r") == 3


def test_binary_search_not_found():
    assert binary_search([5, 45, 112, 422, 743, 45234, 822342], 345) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


def test_binary_search_agrees_with_linear_on_sorted_data():
    items = random_int_array(500, 0, 200)
    for key in range(-5, 210):
        assert binary_search(items, key) == linear_search(items, key)


@pytest.fixture(scope="module")
def random_array():
    return random_int_array(10000, 0, 1000)


def test_random_array_length(random_array):
    assert len(random_array) == 10000


def test_random_array_nothing_below_min(random_array):
    assert min(random_array) >= 0


def test_random_array_nothing_above_max(random_array):
    assert max(random_array) <= 1000


def test_random_array_not_all_same(random_array):
    assert len(set(random_array)) > 1


def test_random_array_dispersed_top(random_array):
    assert any(value > 900 for value in random_array)


def test_random_array_dispersed_bottom(random_array):
    assert any(value < 100 for value in random_array)


def test_random_array_sorted(random_array):
    assert random_array == sorted(random_array)


def test_random_array_bad_range():
    with pytest.raises(ValueError):
        random_int_array(5, 10, 1)


def test_array_search_speed_linear_slower():
    linear, binary = array_search_speed(10000, 200)
    assert linear > binary


def test_array_search_speed_needs_tests():
    with pytest.raises(ValueError):
        array_search_speed(100, 0)