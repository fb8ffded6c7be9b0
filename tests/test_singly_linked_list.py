"""
单向链表(SLinkedList)测试套件
"""

import pytest

from pwt.linkedlist.errors import ListIndexError
from pwt.linkedlist.singly_linked_list import SLinkedList


@pytest.fixture
def empty_list():
    return SLinkedList()


@pytest.fixture
def filled_list():
    return SLinkedList([1, 2, 3, 4, 5])


class TestSLinkedListBasicOperations:
    """测试插入/长度/索引"""

    def test_empty(self, empty_list):
        assert empty_list.get_length() == 0
        assert len(empty_list) == 0
        assert empty_list.is_empty()
        assert list(empty_list) == []
        assert str(empty_list) == ""

    def test_add_first(self, empty_list):
        empty_list.add_first(1)
        empty_list.add_first(2)
        assert list(empty_list) == [2, 1]

    def test_add_last(self, empty_list):
        for value in (1, 2, 3):
            empty_list.add_last(value)
        assert list(empty_list) == [1, 2, 3]
        assert str(empty_list) == "1 2 3 "
        assert empty_list.get_length() == 3

    def test_mixed_add(self, empty_list):
        empty_list.add_last(2)
        empty_list.add_first(1)
        empty_list.add_last(3)
        empty_list.add_first(0)
        assert list(empty_list) == [0, 1, 2, 3]

    def test_get_item(self, filled_list):
        assert [filled_list[i] for i in range(5)] == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("index", [-1, 5, 50])
    def test_index_error(self, filled_list, index):
        with pytest.raises(ListIndexError):
            filled_list[index]

    def test_index_error_on_empty(self, empty_list):
        with pytest.raises(IndexError):
            empty_list[0]


class TestSLinkedListDelete:
    """测试按值删除"""

    def test_delete_head(self, filled_list):
        assert filled_list.delete_element(1) is True
        assert list(filled_list) == [2, 3, 4, 5]

    def test_delete_middle(self, filled_list):
        assert filled_list.delete_element(3) is True
        assert list(filled_list) == [1, 2, 4, 5]

    def test_delete_tail(self, filled_list):
        assert filled_list.delete_element(5) is True
        assert list(filled_list) == [1, 2, 3, 4]
        filled_list.add_last(6)
        assert list(filled_list) == [1, 2, 3, 4, 6]

    def test_delete_deep_match(self):
        sll = SLinkedList(range(10))
        assert sll.delete_element(8) is True
        assert list(sll) == [0, 1, 2, 3, 4, 5, 6, 7, 9]

    def test_delete_not_found(self, filled_list):
        assert filled_list.delete_element(42) is False
        assert list(filled_list) == [1, 2, 3, 4, 5]

    def test_delete_from_empty(self, empty_list):
        assert empty_list.delete_element(1) is False

    def test_delete_first_duplicate(self):
        sll = SLinkedList([1, 2, 1])
        assert sll.delete_element(1) is True
        assert list(sll) == [2, 1]

    def test_delete_none(self):
        sll = SLinkedList([1, None, 2])
        assert None in sll
        assert sll.delete_element(None) is True
        assert list(sll) == [1, 2]


class TestSLinkedListCopy:
    """测试复制"""

    def test_copy_range(self, filled_list):
        assert list(filled_list.copy(1, 4)) == [2, 3, 4]

    def test_copy_full_does_not_share_nodes(self, filled_list):
        copied = filled_list.copy(0, filled_list.get_length())
        assert copied == filled_list
        copied.delete_element(1)
        copied.add_last(6)
        assert list(filled_list) == [1, 2, 3, 4, 5]

    def test_copy_step(self, filled_list):
        assert list(filled_list.copy(0, 5, 2)) == [1, 3, 5]

    def test_copy_empty_range(self, filled_list):
        assert filled_list.copy(2, 2).is_empty()

    @pytest.mark.parametrize("start, stop", [(-1, 2), (3, 8)])
    def test_copy_out_of_range(self, filled_list, start, stop):
        with pytest.raises(ListIndexError):
            filled_list.copy(start, stop)

    def test_copy_invalid_step(self, filled_list):
        with pytest.raises(ValueError):
            filled_list.copy(0, 5, 0)


class TestSLinkedListMerge:
    """测试两种合并方式"""

    def test_merge_by_creating_new_list(self):
        first = SLinkedList([1, 2])
        second = SLinkedList([3, 4])
        first.merge_by_creating_new_list(second)
        assert list(first) == [1, 2, 3, 4]
        assert list(second) == [3, 4]

    def test_merge_by_creating_new_list_with_duplicates(self):
        first = SLinkedList([1, 1, 2])
        second = SLinkedList([1, 2, 2])
        first.merge_by_creating_new_list(second)
        assert list(first) == [1, 1, 2, 1, 2, 2]
        assert list(second) == [1, 2, 2]

    def test_merge_without_creating_new_list(self):
        first = SLinkedList([1, 2])
        second = SLinkedList([3, 4])
        first.merge_without_creating_new_list(second)
        assert list(first) == [1, 2, 3, 4]
        assert list(second) == [3, 4]

    def test_merge_strategies_agree(self):
        a1, a2 = SLinkedList("xyx"), SLinkedList("xyx")
        other = SLinkedList("yx")
        a1.merge_by_creating_new_list(other)
        a2.merge_without_creating_new_list(other)
        assert a1 == a2

    def test_merge_into_empty(self, empty_list, filled_list):
        empty_list.merge_by_creating_new_list(filled_list)
        assert empty_list == filled_list

    def test_merge_with_self(self):
        sll = SLinkedList([1, 2])
        sll.merge_without_creating_new_list(sll)
        assert list(sll) == [1, 2, 1, 2]


class TestSLinkedListSpecialMethods:
    def test_iteration_is_restartable(self, filled_list):
        assert list(filled_list) == list(filled_list) == [1, 2, 3, 4, 5]

    def test_equality(self):
        assert SLinkedList([1, 2]) == SLinkedList([1, 2])
        assert SLinkedList([1, 2]) != SLinkedList([1, 2, 3])
        assert SLinkedList([1, 2, 3]) != SLinkedList([1, 2])
        assert SLinkedList([1]) != [1]

    def test_repr(self, filled_list):
        assert repr(filled_list) == "SLinkedList([1, 2, 3, 4, 5])"
