from abc import ABC, abstractmethod
from typing import Any, Generic

from .const import StateT, EventT, StateCallback, TransitionCallback
from .error import TransitionError
from .transition import Transition


class IStateMachine(ABC, Generic[StateT, EventT]):
    """非层级有限状态机接口，基于事件驱动状态转换"""

    # ********** 状态机初始化 **********

    @abstractmethod
    def get_id(self) -> str:
        """获取状态机唯一标识

        Returns:
            状态机ID字符串
        """
        pass

    @abstractmethod
    def set_current(self, current: StateT) -> None:
        """设置当前状态

        Args:
            current: 当前状态

        Raises:
            ValueError: 如果状态为空则抛出该异常
        """
        pass

    @abstractmethod
    def get_current_state(self) -> StateT | None:
        """获取当前状态

        Returns:
            当前状态，未设置时返回None
        """
        pass

    @abstractmethod
    def set_initial(self, initial: StateT) -> None:
        """设置初始状态，同时将当前状态设置为初始状态

        Args:
            initial: 初始状态

        Raises:
            ValueError: 如果状态为空则抛出该异常
        """
        pass

    @abstractmethod
    def get_initial_state(self) -> StateT | None:
        """获取初始状态

        Returns:
            初始状态，未设置时返回None
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """重置状态机：清空转换规则、回调注册、当前状态与初始状态"""
        pass

    # ********** 转换规则 **********

    @abstractmethod
    def add_transitions(self, *transitions: Transition[StateT, EventT]) -> None:
        """添加一组状态转换规则，相同的 (source, event) 原位替换

        Raises:
            ValueError: 如果任一规则的 source、target 或 event 为空
        """
        pass

    @abstractmethod
    def get_transition(self, source: StateT, event: EventT) -> Transition[StateT, EventT] | None:
        """获取 (source, event) 对应的转换规则

        Returns:
            匹配的转换规则，不存在时返回None
        """
        pass

    @abstractmethod
    def get_transitions(self) -> list[Transition[StateT, EventT]]:
        """按添加顺序获取全部转换规则的副本"""
        pass

    @abstractmethod
    def get_states(self) -> list[StateT]:
        """按首次出现顺序获取全部状态"""
        pass

    @abstractmethod
    def get_events(self) -> list[EventT]:
        """按首次出现顺序获取全部事件"""
        pass

    @abstractmethod
    def get_terminations(self) -> list[StateT]:
        """获取全部终止状态（只作为目标出现、从未作为起始状态出现）"""
        pass

    # ********** 生命周期回调 **********

    @abstractmethod
    def on_enter(self, fn: StateCallback | None) -> None:
        """设置进入任意状态时调用的回调"""
        pass

    @abstractmethod
    def on_exit(self, fn: StateCallback | None) -> None:
        """设置离开任意状态时调用的回调"""
        pass

    @abstractmethod
    def on_enter_state(self, state: StateT, fn: StateCallback) -> None:
        """设置进入指定状态时调用的回调"""
        pass

    @abstractmethod
    def on_exit_state(self, state: StateT, fn: StateCallback) -> None:
        """设置离开指定状态时调用的回调"""
        pass

    @abstractmethod
    def on_transition(self, fn: TransitionCallback | None) -> None:
        """设置状态从 last 转换到 current 后调用的回调"""
        pass

    # ********** 事件处理 **********

    @abstractmethod
    def test_event(self, event: EventT) -> bool:
        """检查当前状态下事件是否存在可用的转换规则，不会调用转换动作

        Returns:
            存在转换规则则返回True，否则返回False
        """
        pass

    @abstractmethod
    def set_event(self, event: EventT, data: Any = None) -> None:
        """设置链式事件，在当前转换完成后继续处理，仅在转换动作中使用

        Args:
            event: 下一个需要处理的事件
            data: 事件载荷
        """
        pass

    @abstractmethod
    def handle_event(self, event: EventT, data: Any = None) -> TransitionError | None:
        """处理事件并触发状态转换，包括转换动作设置的全部链式事件

        Args:
            event: 触发事件
            data: 事件载荷，透传给转换动作

        Returns:
            成功时返回None；没有转换规则或转换被挂起时返回 TransitionError

        Raises:
            ValueError: 如果事件为空则抛出该异常
        """
        pass
