from typing import Any, Callable, Generic, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .const import StateT, EventT, is_empty

if TYPE_CHECKING:
    from .interface import IStateMachine


class Transition(BaseModel, Generic[StateT, EventT]):
    """状态转换规则：在 source 状态下收到 event 时转换到 target 状态

    Attributes:
        event (EventT, optional):
            触发转换的事件。
        source (StateT, optional):
            转换的起始状态。
        target (StateT, optional):
            转换的目标状态。
        action (Callable[[IStateMachine, Any], bool], optional):
            转换动作。为空时直接完成转换；否则在转换前调用，仅当返回True时完成转换。
            动作可以通过 `fsm.set_event` 设置下一个需要处理的链式事件。
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    event: EventT | None = Field(default=None)
    """触发转换的事件"""

    source: StateT | None = Field(default=None)
    """转换的起始状态"""

    target: StateT | None = Field(default=None)
    """转换的目标状态"""

    action: Callable[[Any, Any], bool] | None = Field(default=None)
    """转换动作，返回是否继续执行转换"""

    @classmethod
    def of(
        cls,
        source: StateT,
        target: StateT,
        event: EventT,
        action: Callable[[Any, Any], bool] | None = None,
    ) -> "Transition[StateT, EventT]":
        """创建完整的状态转换规则

        Args:
            source: 起始状态
            target: 目标状态
            event: 触发事件
            action: 转换动作（可选）

        Returns:
            新的状态转换规则
        """
        return cls(event=event, source=source, target=target, action=action)

    def with_source(self, source: StateT) -> "Transition[StateT, EventT]":
        """返回设置了起始状态的新转换规则"""
        return self.model_copy(update={"source": source})

    def with_target(self, target: StateT) -> "Transition[StateT, EventT]":
        """返回设置了目标状态的新转换规则"""
        return self.model_copy(update={"target": target})

    def with_event(self, event: EventT) -> "Transition[StateT, EventT]":
        """返回设置了触发事件的新转换规则"""
        return self.model_copy(update={"event": event})

    def with_action(self, action: Callable[[Any, Any], bool] | None) -> "Transition[StateT, EventT]":
        """返回设置了转换动作的新转换规则"""
        return self.model_copy(update={"action": action})

    def is_valid(self) -> bool:
        """检查起始状态、目标状态和事件是否均已设置"""
        return not (is_empty(self.source) or is_empty(self.target) or is_empty(self.event))

    def add(self, fsm: "IStateMachine[StateT, EventT]") -> None:
        """将当前转换规则添加到指定的状态机中

        Args:
            fsm: 目标状态机
        """
        fsm.add_transitions(self)


def source(state: Any) -> Transition[Any, Any]:
    """以起始状态创建一个待补全的转换规则"""
    return Transition(source=state)


def target(state: Any) -> Transition[Any, Any]:
    """以目标状态创建一个待补全的转换规则"""
    return Transition(target=state)
