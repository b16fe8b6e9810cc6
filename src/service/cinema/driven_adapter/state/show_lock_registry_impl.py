"""
Per-show lock registry

One anyio.Lock per show id, created on first use and kept for the process lifetime.
A condition-guarded gate lets hold_all() run alone: once it is waiting, new show
holders queue behind it, and it starts when the last active holder leaves.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Dict

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.interface.i_show_lock_registry import IShowLockRegistry


class ShowLockRegistryImpl(IShowLockRegistry):
    def __init__(self) -> None:
        self._locks: Dict[int, anyio.Lock] = {}
        self._gate = anyio.Condition()
        self._active_holders = 0
        self._exclusive = False

    def _lock_for(self, show_id: int) -> anyio.Lock:
        # No await between lookup and insert, so two tasks cannot create two locks
        lock = self._locks.get(show_id)
        if lock is None:
            lock = self._locks[show_id] = anyio.Lock()
        return lock

    async def _leave(self, *, exclusive: bool) -> None:
        with anyio.CancelScope(shield=True):
            async with self._gate:
                if exclusive:
                    self._exclusive = False
                else:
                    self._active_holders -= 1
                self._gate.notify_all()

    @asynccontextmanager
    async def hold(self, *, show_id: int) -> AsyncIterator[None]:
        async with self._gate:
            while self._exclusive:
                await self._gate.wait()
            self._active_holders += 1

        try:
            lock = self._lock_for(show_id)
            if lock.locked():
                Logger.base.debug(f'⏳ [LOCK] Waiting for show {show_id}')
            async with lock:
                yield
        finally:
            await self._leave(exclusive=False)

    @asynccontextmanager
    async def hold_all(self) -> AsyncIterator[None]:
        async with self._gate:
            while self._exclusive:
                await self._gate.wait()
            self._exclusive = True
            try:
                while self._active_holders:
                    await self._gate.wait()
            except BaseException:
                self._exclusive = False
                self._gate.notify_all()
                raise

        Logger.base.debug('🔒 [LOCK] Holding every show')
        try:
            yield
        finally:
            await self._leave(exclusive=True)
