import threading
from typing import Any, Callable

from loguru import logger

from .state_machine import BaseStateMachine
from ..model import get_settings


class StateMachinePool:
    """状态机复用池，线程安全。归还的状态机会先被重置再放回池中"""
    _factory: Callable[[], BaseStateMachine[Any, Any]]
    _max_idle: int | None
    _idle: list[BaseStateMachine[Any, Any]]
    _lock: threading.Lock

    def __init__(
        self,
        max_idle: int | None = None,
        factory: Callable[[], BaseStateMachine[Any, Any]] = BaseStateMachine,
    ) -> None:
        """初始化状态机复用池

        Args:
            max_idle: 池中最多保留的空闲状态机数量，None 表示不限制
            factory: 池为空时用于创建新状态机的工厂函数
        """
        if max_idle is not None and max_idle < 0:
            raise ValueError(f"max_idle must not be negative, got {max_idle}")
        self._factory = factory
        self._max_idle = max_idle
        self._idle = []
        self._lock = threading.Lock()

    def acquire(self) -> BaseStateMachine[Any, Any]:
        """从池中取出一个空状态机，池为空时新建

        Returns:
            处于刚创建状态的状态机，使用完毕后应通过 release 归还
        """
        with self._lock:
            if self._idle:
                return self._idle.pop()
        return self._factory()

    def release(self, fsm: BaseStateMachine[Any, Any]) -> None:
        """重置状态机并放回池中，池已满时直接丢弃

        Args:
            fsm: 待归还的状态机
        """
        fsm.reset()
        with self._lock:
            if self._max_idle is not None and len(self._idle) >= self._max_idle:
                logger.debug(f"[StateMachinePool] 池已满（{self._max_idle}），丢弃状态机 {fsm.get_id()[:8]}")
                return
            self._idle.append(fsm)

    def size(self) -> int:
        """获取池中空闲状态机数量"""
        with self._lock:
            return len(self._idle)


_pool: StateMachinePool | None = None
_pool_lock = threading.Lock()


def get_pool() -> StateMachinePool:
    """获取全局默认复用池，容量由 Settings.pool_max_idle 决定"""
    global _pool

    with _pool_lock:
        if _pool is None:
            _pool = StateMachinePool(max_idle=get_settings().pool_max_idle)
        return _pool


def acquire() -> BaseStateMachine[Any, Any]:
    """从全局默认复用池取出一个状态机"""
    return get_pool().acquire()


def release(fsm: BaseStateMachine[Any, Any]) -> None:
    """将状态机归还到全局默认复用池"""
    get_pool().release(fsm)
