class HeapError(Exception):
    """Base class for every error raised by the priority queue."""


class InvalidArgumentError(HeapError, ValueError):
    """Malformed construction parameter, e.g. a negative capacity."""


class NullElementError(HeapError, ValueError):
    """``None`` was offered as a heap element."""


class CapacityExceededError(HeapError, MemoryError):
    """
    Growth would reach ``MAX_CAPACITY``.

    A heap this large almost always means a runaway producer upstream, so
    this is not meant to be caught and retried.
    """


class KeyIncreasedError(HeapError, AssertionError):
    """Decrease-key was asked to move an element away from the root."""


class HeapCorruptionError(HeapError, AssertionError):
    """Raised by ``_validate`` when a child compares below its parent."""

    def __init__(self, index: int, parent: int):
        super().__init__(
            f"Invalid heap state at index {index} (parent {parent})"
        )
        self.index = index
        self.parent = parent


class EmptyHeapError(HeapError, RuntimeError):
    """pop or peek on a heap without live elements."""
