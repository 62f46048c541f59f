from typing import Any

from .const import is_empty, label


class TransitionError(Exception):
    """状态转换错误，作为 handle_event 的返回值而非抛出的异常

    - source 为空：当前状态下没有可以响应该事件的转换规则
    - source 非空：匹配到了转换规则，但被转换动作挂起
    """
    event: Any
    source: Any
    target: Any

    def __init__(self, event: Any, source: Any = None, target: Any = None) -> None:
        self.event = event
        self.source = source
        self.target = target
        super().__init__(self.__str__())

    def is_suspended(self) -> bool:
        """检查状态转换是否被转换动作挂起"""
        return not is_empty(self.source)

    def is_no_transition(self) -> bool:
        """检查是否没有可以响应该事件的转换规则"""
        return is_empty(self.source)

    def __str__(self) -> str:
        if self.is_no_transition():
            return f"no transition for the event '{label(self.event)}'"
        return (
            f"source state '{label(self.source)}' transition for the event "
            f"'{label(self.event)}' is suspended"
        )

    def __repr__(self) -> str:
        return f"TransitionError(event={self.event!r}, source={self.source!r}, target={self.target!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransitionError):
            return NotImplemented
        return (self.event, self.source, self.target) == (other.event, other.source, other.target)

    def __hash__(self) -> int:
        return hash((self.event, self.source, self.target))


def is_suspended(err: object) -> bool:
    """检查错误是否为转换动作挂起导致

    Args:
        err: 任意对象，通常为 handle_event 的返回值

    Returns:
        仅当 err 为挂起的 TransitionError 时返回True
    """
    return isinstance(err, TransitionError) and err.is_suspended()


def is_no_transition(err: object) -> bool:
    """检查错误是否为没有可用的转换规则

    Args:
        err: 任意对象，通常为 handle_event 的返回值

    Returns:
        仅当 err 为无转换规则的 TransitionError 时返回True
    """
    return isinstance(err, TransitionError) and err.is_no_transition()
