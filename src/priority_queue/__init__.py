from src.priority_queue.exceptions import (
    CapacityExceededError,
    EmptyHeapError,
    HeapCorruptionError,
    HeapError,
    InvalidArgumentError,
    KeyIncreasedError,
    NullElementError,
)
from src.priority_queue.heap import D, MAX_CAPACITY, PriorityQueue
