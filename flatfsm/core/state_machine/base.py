from uuid import uuid4
from typing import Any

from loguru import logger

from .interface import IStateMachine
from .const import StateT, EventT, StateCallback, TransitionCallback, is_empty
from .error import TransitionError
from .registry import CallbackRegistry
from .table import TransitionTable
from .transition import Transition


class BaseStateMachine(IStateMachine[StateT, EventT]):
    """基础状态机实现，非线程安全，由调用方负责并发控制"""
    _id: str

    # ========== 状态管理 ==========
    _initial_state: StateT | None
    _current_state: StateT | None
    _table: TransitionTable[StateT, EventT]
    _callbacks: CallbackRegistry[StateT]

    # ========== 链式事件 ==========
    _next_event: EventT | None
    _next_data: Any
    _dispatching: bool

    def __init__(self, **kwargs: Any) -> None:
        """初始化空状态机，需要通过 set_initial 或 set_current 设置状态

        Args:
            kwargs: 其他参数（保留以备扩展）
        """
        # 状态机唯一标识
        self._id = str(uuid4())

        self._initial_state = None
        self._current_state = None
        self._table = TransitionTable()
        self._callbacks = CallbackRegistry()

        self._next_event = None
        self._next_data = None
        self._dispatching = False

    def __repr__(self) -> str:
        return self.__str__()

    def __str__(self) -> str:
        return f"BaseStateMachine(id={self._id}, current={self._current_state}, transitions={len(self._table)})"

    # ********** 状态机初始化 **********

    def get_id(self) -> str:
        """获取状态机唯一标识

        Returns:
            状态机ID字符串
        """
        return self._id

    def set_current(self, current: StateT) -> None:
        if is_empty(current):
            raise ValueError("the current state must not be empty")
        self._current_state = current

    def get_current_state(self) -> StateT | None:
        return self._current_state

    def set_initial(self, initial: StateT) -> None:
        if is_empty(initial):
            raise ValueError("the initial state must not be empty")
        self._initial_state = initial
        self._current_state = initial

    def get_initial_state(self) -> StateT | None:
        return self._initial_state

    def reset(self) -> None:
        """重置状态机到刚创建时的状态，状态机ID保持不变"""
        if self._dispatching:
            raise RuntimeError("Cannot reset the state machine while an event is being handled")
        self._table.clear()
        self._callbacks.clear()
        self._initial_state = None
        self._current_state = None
        self._clear_event()

    # ********** 转换规则 **********

    def add_transitions(self, *transitions: Transition[StateT, EventT]) -> None:
        self._table.add(*transitions)

    def get_transition(self, source: StateT, event: EventT) -> Transition[StateT, EventT] | None:
        return self._table.lookup(source, event)

    def get_transitions(self) -> list[Transition[StateT, EventT]]:
        return self._table.all()

    def get_states(self) -> list[StateT]:
        return self._table.states()

    def get_events(self) -> list[EventT]:
        return self._table.events()

    def get_terminations(self) -> list[StateT]:
        return self._table.terminations()

    # ********** 生命周期回调 **********

    def on_enter(self, fn: StateCallback | None) -> None:
        self._callbacks.on_enter(fn)

    def on_exit(self, fn: StateCallback | None) -> None:
        self._callbacks.on_exit(fn)

    def on_enter_state(self, state: StateT, fn: StateCallback) -> None:
        self._callbacks.on_enter_state(state, fn)

    def on_exit_state(self, state: StateT, fn: StateCallback) -> None:
        self._callbacks.on_exit_state(state, fn)

    def on_transition(self, fn: TransitionCallback | None) -> None:
        self._callbacks.on_transition(fn)

    # ********** 事件处理 **********

    def test_event(self, event: EventT) -> bool:
        return self._table.index(self._current_state, event) > -1

    def set_event(self, event: EventT, data: Any = None) -> None:
        if is_empty(event):
            raise ValueError("FSM: the chained event must not be empty")
        self._next_event = event
        self._next_data = data

    def _clear_event(self) -> None:
        self._next_event = None
        self._next_data = None

    def handle_event(self, event: EventT, data: Any = None) -> TransitionError | None:
        """处理事件并触发状态转换

        转换动作中通过 set_event 设置的链式事件会在当前转换完成后继续处理，直到没有新的
        链式事件，或者某次处理返回了非挂起的错误。返回值为最后一次处理的结果。

        Args:
            event: 触发事件
            data: 事件载荷，透传给转换动作

        Returns:
            成功时返回None；没有转换规则或转换被挂起时返回 TransitionError

        Raises:
            ValueError: 如果事件为空则抛出该异常
            RuntimeError: 如果在转换动作或回调中再次调用 handle_event 则抛出该异常
        """
        if is_empty(event):
            raise ValueError("FSM: the event must not be empty")
        if self._dispatching:
            raise RuntimeError("FSM: handle_event cannot be called re-entrantly, use set_event in the action instead")

        self._dispatching = True
        try:
            while True:
                self._clear_event()
                err = self._dispatch(event, data)
                if self._next_event is None or (err is not None and not err.is_suspended()):
                    break
                logger.debug(f"[fsm:{self._id[:8]}] 处理链式事件：{self._next_event}")
                event, data = self._next_event, self._next_data
        except Exception as e:
            logger.error(f"[fsm:{self._id[:8]}] 处理事件 {event} 失败：{e}")
            raise e
        finally:
            self._clear_event()
            self._dispatching = False

        return err

    def _dispatch(self, event: EventT, data: Any) -> TransitionError | None:
        """处理单个事件，最多完成一次状态转换"""
        current = self._current_state
        transition = self._table.lookup(current, event)
        if transition is None:
            logger.debug(f"[fsm:{self._id[:8]}] 状态 {current} 下没有事件 {event} 的转换规则")
            return TransitionError(event)

        if transition.action is not None and not transition.action(self, data):
            logger.debug(f"[fsm:{self._id[:8]}] 转换被挂起：{transition.source} --{event}--> {transition.target}")
            return TransitionError(event, transition.source, transition.target)

        exit_state = self._callbacks.get_exit_state(current)    # type: ignore[arg-type]
        if exit_state is not None:
            exit_state(current)
        if self._callbacks.exit is not None:
            self._callbacks.exit(current)

        target = transition.target
        self.set_current(target)    # type: ignore[arg-type]

        enter_state = self._callbacks.get_enter_state(target)    # type: ignore[arg-type]
        if enter_state is not None:
            enter_state(target)
        if self._callbacks.enter is not None:
            self._callbacks.enter(target)

        if self._callbacks.transition is not None:
            self._callbacks.transition(current, target)

        logger.info(f"[fsm:{self._id[:8]}] {current} → {target}（事件：{event}）")
        return None
