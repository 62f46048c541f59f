from typing import Generic

from .const import StateT, StateCallback, TransitionCallback


class CallbackRegistry(Generic[StateT]):
    """生命周期回调注册表，每个注册点只保留最后一次注册的回调"""
    # 全局回调
    _enter: StateCallback | None
    _exit: StateCallback | None
    _transition: TransitionCallback | None
    # 指定状态回调
    _enter_states: dict[StateT, StateCallback]
    _exit_states: dict[StateT, StateCallback]

    def __init__(self) -> None:
        self._enter = None
        self._exit = None
        self._transition = None
        self._enter_states = {}
        self._exit_states = {}

    # ********** 回调注册 **********

    def on_enter(self, fn: StateCallback | None) -> None:
        self._enter = fn

    def on_exit(self, fn: StateCallback | None) -> None:
        self._exit = fn

    def on_transition(self, fn: TransitionCallback | None) -> None:
        self._transition = fn

    def on_enter_state(self, state: StateT, fn: StateCallback) -> None:
        self._enter_states[state] = fn

    def on_exit_state(self, state: StateT, fn: StateCallback) -> None:
        self._exit_states[state] = fn

    def clear(self) -> None:
        """清除全部回调注册"""
        self._enter = None
        self._exit = None
        self._transition = None
        self._enter_states.clear()
        self._exit_states.clear()

    # ********** 回调查询 **********

    @property
    def enter(self) -> StateCallback | None:
        return self._enter

    @property
    def exit(self) -> StateCallback | None:
        return self._exit

    @property
    def transition(self) -> TransitionCallback | None:
        return self._transition

    def get_enter_state(self, state: StateT) -> StateCallback | None:
        return self._enter_states.get(state)

    def get_exit_state(self, state: StateT) -> StateCallback | None:
        return self._exit_states.get(state)
