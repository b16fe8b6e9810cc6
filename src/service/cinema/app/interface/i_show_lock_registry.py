from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class IShowLockRegistry(ABC):
    """
    Per-show mutual exclusion.

    A booking or cancellation holds the lock of its show for the whole
    check -> mutate -> store sequence. Different shows never contend.
    hold_all() excludes every show at once, for operations that replace the catalog.
    """

    @abstractmethod
    def hold(self, *, show_id: int) -> AbstractAsyncContextManager[None]:
        pass

    @abstractmethod
    def hold_all(self) -> AbstractAsyncContextManager[None]:
        """Wait for every held show lock to be released and keep new holders out"""
        pass
