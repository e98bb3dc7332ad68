import pytest

from dsapractice.linked_list import (
    ListNode,
    detect_cycle,
    from_values,
    get_intersection_node,
    has_cycle,
    is_palindrome_list,
    odd_even_list,
    remove_nth_from_end,
    reverse_list,
    swap_pairs,
    to_values,
)


def _nodes(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def _with_cycle(values, pos):
    head = from_values(values)
    nodes = _nodes(head)
    nodes[-1].next = nodes[pos]
    return head, nodes


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3], [5, 5, 4, 3, 9]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_iter_yields_values_from_node():
    head = from_values([4, 8, 15])
    assert list(head.next) == [8, 15]


def test_empty_builds_none():
    assert from_values([]) is None


@pytest.mark.parametrize("pos", [0, 1, 3])
def test_cycle_detected(pos):
    head, nodes = _with_cycle([3, 2, 0, -4], pos)
    assert has_cycle(head) is True
    assert detect_cycle(head) is nodes[pos]


def test_self_loop_single_node():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True
    assert detect_cycle(node) is node


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_no_cycle(values):
    head = from_values(values)
    assert has_cycle(head) is False
    assert detect_cycle(head) is None


def test_intersection_found():
    shared = from_values([8, 4, 5])
    a = from_values([4, 1])
    _nodes(a)[-1].next = shared
    b = from_values([5, 6, 1])
    _nodes(b)[-1].next = shared
    assert get_intersection_node(a, b) is shared
    assert get_intersection_node(b, a) is shared


def test_intersection_same_list():
    head = from_values([1, 2])
    assert get_intersection_node(head, head) is head


def test_no_intersection():
    a = from_values([2, 6, 4])
    b = from_values([1, 5])
    assert get_intersection_node(a, b) is None
    assert get_intersection_node(a, None) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    head = remove_nth_from_end(from_values(values), n)
    cut = len(values) - n
    assert to_values(head) == values[:cut] + values[cut + 1:]


def test_remove_only_node():
    assert remove_nth_from_end(from_values([1]), 1) is None


@pytest.mark.parametrize("n", [0, -1, 4])
def test_remove_out_of_range(n):
    with pytest.raises(IndexError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


def test_remove_from_empty():
    with pytest.raises(IndexError):
        remove_nth_from_end(None, 1)


@pytest.mark.parametrize("values", [[], [1], [1, 2], [3, 1, 4, 1, 5]])
def test_reverse(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 2, 1], True),
        ([1, 2], False),
        ([], True),
        ([7], True),
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 3, 1], False),
    ],
)
def test_is_palindrome_list(values, expected):
    head = from_values(values)
    assert is_palindrome_list(head) is expected
    assert to_values(head) == values


def test_swap_pairs_example():
    assert to_values(swap_pairs(from_values([1, 2, 3, 4]))) == [2, 1, 4, 3]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [1, 2, 3, 4, 5, 6]])
def test_swap_pairs_twice_restores(values):
    once = to_values(swap_pairs(from_values(values)))
    assert sorted(once) == sorted(values)
    assert to_values(swap_pairs(from_values(once))) == values


def test_swap_pairs_odd_keeps_last():
    values = [1, 2, 3, 4, 5]
    result = to_values(swap_pairs(from_values(values)))
    assert result[-1] == values[-1]


def test_odd_even_example():
    assert to_values(odd_even_list(from_values([1, 2, 3, 4, 5]))) == [1, 3, 5, 2, 4]


@pytest.mark.parametrize("values", [[], [1], [2, 1], [2, 1, 3, 5, 6, 4, 7]])
def test_odd_even_grouping(values):
    result = to_values(odd_even_list(from_values(values)))
    assert result == values[0::2] + values[1::2]