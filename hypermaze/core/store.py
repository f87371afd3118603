"""内存存储

保存迷宫和会话，按 ID 读写；会话存储为每个会话提供独立的锁
"""

import threading
from typing import Generic, Optional, TypeVar

from .maze import Maze
from .session import MazeSession

T = TypeVar("T")


class _InMemoryStore(Generic[T]):
    def __init__(self):
        self._items: dict[str, T] = {}
        self._lock = threading.Lock()

    def get(self, item_id: str) -> Optional[T]:
        """按 ID 读取

        Returns:
            对象，如果不存在则返回 None
        """
        with self._lock:
            return self._items.get(item_id)

    def get_all(self) -> list[T]:
        with self._lock:
            return list(self._items.values())

    def save(self, item: T) -> None:
        with self._lock:
            self._items[item.id] = item

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class InMemoryMazeStore(_InMemoryStore[Maze]):
    """迷宫存储"""


class InMemorySessionStore(_InMemoryStore[MazeSession]):
    """会话存储"""

    def __init__(self):
        super().__init__()
        self._session_locks: dict[str, threading.Lock] = {}

    def get_by_maze(self, maze_id: str) -> list[MazeSession]:
        with self._lock:
            return [s for s in self._items.values() if s.maze_id == maze_id]

    def lock_for(self, session_id: str) -> threading.Lock:
        """获取会话专属的锁，移动操作（先读后写）须在锁内完成"""
        with self._lock:
            lock = self._session_locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._session_locks[session_id] = lock
            return lock
