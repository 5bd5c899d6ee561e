import pytest

from structkit.cursors import IteratorCategory, advance, next_of, prev_of
from structkit.list_cursor import InvalidCursorError, ListCursor, ListNode


class _Chain:
    """Minimal owner exposing head and tail nodes."""

    def __init__(self, values):
        self.head_node = None
        self.tail_node = None
        for v in values:
            node = ListNode(v, None, self.tail_node)
            if self.tail_node is None:
                self.head_node = node
            else:
                self.tail_node.next_node = node
            self.tail_node = node


@pytest.fixture
def chain():
    return _Chain(["a", "b", "c"])


def _collect_forward(owner):
    cursor = ListCursor(owner, owner.head_node)
    end = ListCursor(owner, None)
    out = []
    while cursor != end:
        out.append(cursor.value())
        cursor.forward()
    return out


def _collect_reverse(owner):
    cursor = ListCursor(owner, owner.tail_node, reverse=True)
    end = ListCursor(owner, None, reverse=True)
    out = []
    while cursor != end:
        out.append(cursor.value())
        cursor.forward()
    return out


def test_node_links():
    first = ListNode(1)
    second = ListNode(2, None, first)
    first.next_node = second
    assert first.next_node.data == 2
    assert second.prev_node is first
    assert first.prev_node is None


def test_forward_traversal(chain):
    assert _collect_forward(chain) == ["a", "b", "c"]


def test_reverse_traversal(chain):
    assert _collect_reverse(chain) == ["c", "b", "a"]


def test_backward_returns_to_start(chain):
    cursor = ListCursor(chain, chain.head_node)
    cursor.forward().forward()
    assert cursor.value() == "c"
    cursor.backward().backward()
    assert cursor.value() == "a"
    assert cursor == ListCursor(chain, chain.head_node)


def test_reverse_backward_moves_right(chain):
    cursor = ListCursor(chain, chain.head_node, reverse=True)
    cursor.backward()
    assert cursor.value() == "b"


def test_end_cursor_cannot_be_read(chain):
    with pytest.raises(InvalidCursorError):
        ListCursor(chain, None).value()


def test_end_cursor_cannot_move(chain):
    end = ListCursor(chain, None)
    with pytest.raises(InvalidCursorError):
        end.forward()
    with pytest.raises(InvalidCursorError):
        end.backward()


def test_cursor_without_owner_is_invalid(chain):
    cursor = ListCursor(None, chain.head_node)
    assert not cursor.is_valid
    with pytest.raises(InvalidCursorError):
        cursor.value()


def test_invalid_cursor_error_is_runtime_error(chain):
    with pytest.raises(RuntimeError):
        ListCursor(chain, None).value()


def test_equality_depends_on_owner_node_and_direction(chain):
    other = _Chain(["a", "b", "c"])
    here = ListCursor(chain, chain.head_node)
    assert here == ListCursor(chain, chain.head_node)
    assert not here == ListCursor(other, chain.head_node)
    assert not here == ListCursor(chain, chain.tail_node)
    assert not here == ListCursor(chain, chain.head_node, reverse=True)


def test_base_of_rbegin_is_end(chain):
    rbegin = ListCursor(chain, chain.tail_node, reverse=True)
    assert rbegin.base() == ListCursor(chain, None)


def test_base_of_reverse_middle_points_right(chain):
    middle = ListCursor(chain, chain.head_node.next_node, reverse=True)
    base = middle.base()
    assert not base.reverse
    assert base.value() == chain.tail_node.data


def test_base_of_rend_is_begin(chain):
    rend = ListCursor(chain, None, reverse=True)
    assert rend.base() == ListCursor(chain, chain.head_node)


def test_base_of_forward_cursor_is_copy(chain):
    cursor = ListCursor(chain, chain.head_node)
    copy = cursor.base()
    copy.forward()
    assert cursor.value() == "a"
    assert copy.value() == "b"


def test_cursor_category_is_bidirectional():
    assert ListCursor.category.includes(IteratorCategory.BIDIRECTIONAL)
    assert not ListCursor.category.includes(IteratorCategory.RANDOM_ACCESS)


def test_advance_moves_in_place(chain):
    cursor = ListCursor(chain, chain.head_node)
    result = advance(cursor, 2)
    assert result.value() == "c"
    advance(cursor, -1)
    assert cursor.value() == "b"


def test_next_and_prev_leave_original(chain):
    cursor = ListCursor(chain, chain.head_node)
    moved = next_of(cursor, 2)
    assert cursor.value() == "a"
    assert moved.value() == "c"
    back = prev_of(moved)
    assert back.value() == "b"
    assert moved.value() == "c"


def test_advance_past_end_reaches_end_cursor(chain):
    cursor = next_of(ListCursor(chain, chain.head_node), 3)
    assert cursor == ListCursor(chain, None)
    with pytest.raises(InvalidCursorError):
        advance(cursor, 1)