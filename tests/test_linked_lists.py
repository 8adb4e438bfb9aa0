import pytest

from dsakit.linked_lists import (
    LinkedList,
    ListNode,
    add_one,
    add_two_numbers,
    delete_duplicates,
    find_middle,
    from_values,
    get_intersection_node,
    has_cycle,
    is_circular,
    is_palindrome,
    merge_two_lists,
    reverse_list,
    to_values,
)


def _number(digits):
    return int("".join(map(str, digits)))


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [5, 5, 0]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_add_one_example():
    assert to_values(add_one(from_values([1, 9, 9]))) == [2, 0, 0]


@pytest.mark.parametrize("digits", [[0], [1, 2, 3], [9], [9, 9, 9], [4, 0, 9]])
def test_add_one_adds_one(digits):
    result = to_values(add_one(from_values(digits)))
    assert _number(result) == _number(digits) + 1


def test_add_one_all_nines_gets_new_head():
    head = from_values([9, 9])
    result = add_one(head)
    assert result is not head
    assert result.next is head
    assert to_values(result)[0] == 1


def test_add_one_empty():
    assert to_values(add_one(None)) == [1]


def test_add_two_numbers_example():
    result = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b", [([9, 9, 9], [1]), ([0], [0]), ([1, 8], [0]), ([5], [5])]
)
def test_add_two_numbers_sum(a, b):
    result = to_values(add_two_numbers(from_values(a), from_values(b)))
    assert _number(result[::-1]) == _number(a[::-1]) + _number(b[::-1])


def test_is_circular():
    head = from_values([1, 2, 3])
    assert is_circular(head) is False
    head.next.next.next = head
    assert is_circular(head) is True


def test_is_circular_empty_and_inner_loop():
    assert is_circular(None) is False
    head = from_values([1, 2, 3])
    head.next.next.next = head.next
    assert is_circular(head) is False


def test_has_cycle():
    head = from_values([1, 2, 3])
    assert has_cycle(head) is False
    head.next.next.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_trivial():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False


def test_find_middle_odd_and_even():
    assert find_middle(from_values([1, 2, 3, 4, 5])).val == 3
    assert find_middle(from_values([1, 2, 3, 4])).val == 2


def test_find_middle_empty():
    assert find_middle(None) is None


def test_intersection_found():
    common = from_values([8, 4, 5])
    head_a = ListNode(4, ListNode(1, common))
    head_b = ListNode(5, ListNode(6, ListNode(1, common)))
    assert get_intersection_node(head_a, head_b) is common


def test_intersection_absent():
    assert get_intersection_node(from_values([1, 2]), from_values([1, 2])) is None
    assert get_intersection_node(None, from_values([1])) is None


@pytest.mark.parametrize(
    "a, b", [([1, 3, 5], [2, 4, 6]), ([], [1, 2]), ([1, 1], []), ([1, 2, 9], [2, 3])]
)
def test_merge_two_lists(a, b):
    assert to_values(merge_two_lists(from_values(a), from_values(b))) == sorted(a + b)


@pytest.mark.parametrize(
    "values, expected",
    [([1, 2, 2, 1], True), ([1, 2, 1], True), ([1, 2], False), ([], True), ([7], True)],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(from_values(values)) is expected


@pytest.mark.parametrize("values", [[1, 1, 2, 3, 3], [], [4, 4, 4], [1, 2, 3]])
def test_delete_duplicates(values):
    assert to_values(delete_duplicates(from_values(values))) == sorted(set(values))


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [], [1]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


def test_linked_list_example():
    items = LinkedList()
    items.insert_at_end(1)
    items.insert_at_end(2)
    items.insert_at_start(0)
    items.insert_at_position(3, 2)
    assert str(items) == "0 -> 1 -> 3 -> 2 -> NULL"


def test_linked_list_empty_str():
    assert str(LinkedList()) == "NULL"


def test_linked_list_insert_at_length_appends():
    items = LinkedList([1, 2])
    items.insert_at_position(3, 2)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_linked_list_insert_out_of_range_ignored():
    items = LinkedList([1, 2])
    items.insert_at_position(9, 5)
    items.insert_at_position(9, -1)
    assert list(items) == [1, 2]