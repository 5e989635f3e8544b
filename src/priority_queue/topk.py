from typing import Any

from src.priority_queue.heap import PriorityQueue


def get_topk(heap: PriorityQueue, k: int) -> list[Any]:
    """
    Function to get the K smallest elements from a heap.

    The heap itself is left untouched: its live elements are copied into a
    scratch heap which is then popped K times.

    Parameters
    ----------
    heap : PriorityQueue
        A PriorityQueue object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements in ascending order. Fewer than K are returned
        when the heap holds fewer elements.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = PriorityQueue.from_sequence(heap.items())
    return [scratch.pop() for _ in range(min(k, len(scratch)))]
