import pytest

from bicoco import ListHelper, OutOfRangeError, NA


@pytest.fixture
def strings():
    return ["A", "B", "C", "D", "DA", "ABC"]


@pytest.fixture
def numbers():
    return [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_each_visits_in_order(strings):
    seen = []
    ListHelper(strings).each(seen.append)
    assert seen == strings


def test_map_returns_new_list(strings):
    result = ListHelper(strings).map(lambda s: s + "B" if s.startswith("A") else s)
    assert result == ["AB", "B", "C", "D", "DA", "ABCB"]
    assert strings == ["A", "B", "C", "D", "DA", "ABC"]


def test_map_inplace_keeps_identity(strings):
    original = strings
    assert ListHelper(strings).map_inplace(lambda s: s + "B" if s.startswith("A") else s) is None
    assert strings is original
    assert strings == ["AB", "B", "C", "D", "DA", "ABCB"]


def test_map_inplace_leaves_list_unchanged_on_error(numbers):
    def boom(i):
        if i == 5:
            raise ValueError("boom")
        return i * 10

    with pytest.raises(ValueError, match="boom"):
        ListHelper(numbers).map_inplace(boom)
    assert numbers == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_transform_changes_element_type(strings):
    assert ListHelper(strings).transform(len) == [1, 1, 1, 1, 2, 3]


def test_select_short_strings(strings):
    assert ListHelper(strings).select(lambda s: len(s) < 2) == ["A", "B", "C", "D"]
    assert strings == ["A", "B", "C", "D", "DA", "ABC"]


def test_select_and_reject_partition(numbers):
    helper = ListHelper(numbers)
    selected = helper.select(lambda i: i % 3 == 0)
    rejected = helper.reject(lambda i: i % 3 == 0)
    assert selected == [3, 6, 9]
    assert rejected == [1, 2, 4, 5, 7, 8]
    assert sorted(selected + rejected) == numbers


def test_select_inplace(numbers):
    ListHelper(numbers).select_inplace(lambda i: i < 4)
    assert numbers == [1, 2, 3]


def test_reject_inplace(numbers):
    ListHelper(numbers).reject_inplace(lambda i: i < 4)
    assert numbers == [4, 5, 6, 7, 8, 9]


def test_inplace_matches_pure_result(numbers):
    expected = ListHelper(numbers).reject(lambda i: i % 2)
    ListHelper(numbers).reject_inplace(lambda i: i % 2)
    assert numbers == expected


def test_compact_inplace_removes_none_and_na(numbers):
    ListHelper(numbers).push(None, NA(None), None)
    ListHelper(numbers).compact_inplace()
    assert numbers == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_compact_is_pure():
    values = [None, 0, "", NA(int), False]
    assert ListHelper(values).compact() == [0, "", False]
    assert len(values) == 5


def test_push_is_chainable():
    values = []
    helper = ListHelper(values)
    assert helper.push(1).push(2).insert(3) is helper
    assert values == [1, 2, 3]


def test_push_variadic_keeps_argument_order():
    values = ["x"]
    ListHelper(values).push("a", "b", "c")
    assert values == ["x", "a", "b", "c"]


def test_at_with_negative_index():
    helper = ListHelper(["A", "B", "C"])
    assert helper.at(0) == "A"
    assert helper.at(-1) == "C"
    assert helper.at(-3) == "A"


@pytest.mark.parametrize("index", [3, 5, -4, -100])
def test_at_out_of_range_is_na(index):
    assert isinstance(ListHelper(["A", "B", "C"]).at(index), NA)


def test_at_negative_matches_translated_index(strings):
    helper = ListHelper(strings)
    for i in range(-len(strings), 0):
        assert helper.at(i) == helper.at(len(strings) + i)


def test_at_on_absent_list_is_na():
    assert isinstance(ListHelper(None).at(0), NA)


def test_at_returns_stored_none_not_na():
    assert ListHelper([None]).at(0) is None


def test_fetch_in_range():
    assert ListHelper(["A", "B"]).fetch(1) == "B"


@pytest.mark.parametrize("index", [2, 5, -1])
def test_fetch_out_of_range_raises(index):
    with pytest.raises(OutOfRangeError):
        ListHelper(["A", "B"]).fetch(index)


def test_out_of_range_error_is_index_error():
    with pytest.raises(IndexError):
        ListHelper([]).fetch(0)


def test_fetch_with_default():
    helper = ListHelper(["A", "B"])
    assert helper.fetch(1, "default") == "B"
    assert helper.fetch(5, "default") == "default"
    assert helper.fetch(-1, "default") == "default"
    assert helper.fetch(5, None) is None


def test_fetch_with_default_on_absent_list():
    assert ListHelper(None).fetch(0, "default") == "default"


def test_index_must_be_integer():
    with pytest.raises(TypeError):
        ListHelper(["A"]).at("0")
    with pytest.raises(TypeError):
        ListHelper(["A"]).fetch(0.0)


def test_first_and_last():
    helper = ListHelper(["A", "B", "C"])
    assert helper.first() == "A"
    assert helper.last() == "C"


def test_first_and_last_of_empty_list():
    helper = ListHelper([])
    assert isinstance(helper.first(), NA)
    assert isinstance(helper.last(), NA)


def test_take_and_drop(strings):
    helper = ListHelper(strings)
    assert helper.take(2) == ["A", "B"]
    assert helper.drop(4) == ["DA", "ABC"]
    for n in range(len(strings) + 1):
        assert helper.take(n) + helper.drop(n) == strings


def test_take_returns_copy(numbers):
    taken = ListHelper(numbers).take(3)
    taken.append(100)
    assert numbers == [1, 2, 3, 4, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("n", [10, -1])
def test_take_and_drop_out_of_range(numbers, n):
    with pytest.raises(OutOfRangeError):
        ListHelper(numbers).take(n)
    with pytest.raises(OutOfRangeError):
        ListHelper(numbers).drop(n)


def test_is_empty():
    assert ListHelper([]).is_empty()
    assert ListHelper(None).is_empty()
    assert ListHelper(NA(None)).is_empty()
    assert not ListHelper([None]).is_empty()


def test_is_not_empty():
    assert ListHelper([1]).is_not_empty()
    assert not ListHelper([]).is_not_empty()
    assert not ListHelper(None).is_not_empty()


def test_size_is_strict(numbers):
    assert ListHelper(numbers).size() == 9
    assert ListHelper([]).size() == 0
    with pytest.raises(OutOfRangeError):
        ListHelper(None).size()


def test_count_is_lenient(numbers):
    assert ListHelper(numbers).count() == 9
    assert ListHelper(None).count() == 0
    assert ListHelper(numbers).count(lambda i: i > 6) == 3
    assert ListHelper(None).count(lambda i: i > 6) == 0


def test_all(numbers):
    helper = ListHelper(numbers)
    assert helper.all(lambda i: i > 0)
    assert not helper.all(lambda i: i > 1)
    assert ListHelper([]).all(lambda i: False)
    assert helper.every(lambda i: i < 10)


def test_all_short_circuits(numbers):
    seen = []

    def check(i):
        seen.append(i)
        return i < 3

    assert not ListHelper(numbers).all(check)
    assert seen == [1, 2, 3]


def test_any_is_false_when_nothing_matches(numbers):
    helper = ListHelper(numbers)
    assert helper.any(lambda i: i == 5)
    assert not helper.any(lambda i: i > 100)
    assert not ListHelper([]).any(lambda i: True)
    assert helper.some(lambda i: i == 9)


def test_any_short_circuits(numbers):
    seen = []

    def check(i):
        seen.append(i)
        return i == 2

    assert ListHelper(numbers).any(check)
    assert seen == [1, 2]


def test_detect_and_find(strings):
    helper = ListHelper(strings)
    assert helper.detect(lambda s: s.startswith("D")) == "D"
    assert helper.find(lambda s: len(s) == 3) == "ABC"
    assert isinstance(helper.detect(lambda s: s == "Z"), NA)


def test_reduce():
    assert ListHelper([10, 20, 30, 40, 50]).reduce(0, lambda acc, x: acc + x) == 150


def test_reduce_folds_left():
    assert ListHelper(["a", "b", "c"]).reduce("", lambda acc, x: f"({acc}{x})") == "(((a)b)c)"


def test_reduce_empty_returns_seed():
    seed = object()
    assert ListHelper([]).reduce(seed, lambda acc, x: x) is seed


def test_callback_errors_propagate(numbers):
    def fail(_):
        raise KeyError("missing")

    with pytest.raises(KeyError):
        ListHelper(numbers).select(fail)
    with pytest.raises(KeyError):
        ListHelper(numbers).reduce(0, lambda acc, x: fail(x))


def test_repr():
    assert repr(ListHelper([1, 2])) == "ListHelper([1, 2])"


def test_fetch_matches_at_in_range(strings):
    helper = ListHelper(strings)
    for i in range(len(strings)):
        assert helper.fetch(i) == helper.at(i)


@pytest.mark.parametrize("condition", [lambda i: i < 4, lambda i: i % 2, lambda i: False, lambda i: True])
def test_select_inplace_matches_select(numbers, condition):
    expected = ListHelper(numbers).select(condition)
    ListHelper(numbers).select_inplace(condition)
    assert numbers == expected


def test_length_is_count(numbers):
    assert ListHelper(numbers).length() == 9
    assert ListHelper(None).length() == 0
    assert ListHelper(numbers).length(lambda i: i > 7) == 2
