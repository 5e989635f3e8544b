from src.priority_queue.heap import PriorityQueue
from src.priority_queue.topk import get_topk


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = PriorityQueue.from_sequence([10, 5, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_zero_k(self):
        heap = PriorityQueue.from_sequence([10, 5, 3])
        assert get_topk(heap, 0) == []

    def test_get_topk_with_empty_heap(self):
        heap = PriorityQueue()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = PriorityQueue.from_sequence([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        expected = [1, 5, 10]
        assert result == expected

    def test_get_topk_leaves_heap_untouched(self):
        heap = PriorityQueue.from_sequence([10, 5, 15, 1, 20])
        before = heap.items()
        get_topk(heap, 2)
        assert len(heap) == 5
        assert heap.items() == before
        assert heap.pop() == 1

    def test_get_topk_with_k_larger_than_heap(self):
        heap = PriorityQueue.from_sequence([3, 1, 2])
        assert get_topk(heap, 10) == [1, 2, 3]

    def test_get_topk_with_duplicates(self):
        heap = PriorityQueue.from_sequence([10, 10, 5, 15])
        result = get_topk(heap, 3)
        assert result == [5, 10, 10]

    def test_get_topk_with_tuple_elements(self):
        heap = PriorityQueue()
        for pair in [(10, "ten"), (5, "five"), (15, "fifteen"), (1, "one")]:
            heap.push(pair)
        result = get_topk(heap, 2)
        assert [label for _, label in result] == ["one", "five"]

    def test_get_topk_with_negative_values(self):
        heap = PriorityQueue.from_sequence([-10, 0, 5, -5])
        result = get_topk(heap, 2)
        expected = [-10, -5]
        assert result == expected
