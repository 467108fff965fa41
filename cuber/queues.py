"""
Queues with a history, used for pending twists and scheduled steps.
"""

from typing import Any, Callable, List, Optional


class Queue:
    """
    Pending items in ``future``, executed items in ``history``.

    Args:
        validate (callable, optional): Called with the raw arguments of ``add``;
            returns the list of items to append
    """

    def __init__(self, validate: Optional[Callable[..., List[Any]]] = None):
        self.validate = validate
        self.future: List[Any] = []
        self.history: List[Any] = []
        self.is_ready = True
        self.is_looping = False

    def add(self, *items) -> List[Any]:
        """
        Append items to ``future``.

        Returns:
            list: The items actually appended after validation
        """
        items = list(items)
        if self.validate is not None:
            items = list(self.validate(*items))
        self.future.extend(items)
        return items

    def empty(self):
        self.future = []

    def do(self):
        """
        Move the next pending item into ``history`` and return it.

        When nothing is pending and the queue loops, the whole history is
        replayed: it becomes the new ``future`` and ``history`` starts over.
        """
        if self.future:
            item = self.future.pop(0)
            self.history.append(item)
            return item
        if self.is_looping:
            self.future = list(self.history)
            self.history = []
        return None

    def undo(self):
        if self.history:
            item = self.history.pop()
            self.future.insert(0, item)
            return item
        return None

    def redo(self):
        return self.do()

    def __len__(self) -> int:
        return len(self.future)
