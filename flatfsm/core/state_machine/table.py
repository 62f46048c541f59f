from typing import Generic, Iterator

from loguru import logger

from .const import StateT, EventT
from .transition import Transition


class TransitionTable(Generic[StateT, EventT]):
    """有序的状态转换规则表，(source, event) 唯一，重复添加时原位替换"""
    _transitions: list[Transition[StateT, EventT]]

    def __init__(self) -> None:
        self._transitions = []

    def __len__(self) -> int:
        return len(self._transitions)

    def __iter__(self) -> Iterator[Transition[StateT, EventT]]:
        return iter(self._transitions.copy())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.index(key[0], key[1]) > -1

    # ********** 规则维护 **********

    def add(self, *transitions: Transition[StateT, EventT]) -> None:
        """添加一组状态转换规则

        先校验全部规则，再按从左到右的顺序逐条添加：若已存在相同的 (source, event)
        则原位替换，否则追加到末尾。

        Args:
            *transitions: 待添加的状态转换规则

        Raises:
            ValueError: 如果任一规则的 source、target 或 event 为空
        """
        for transition in transitions:
            if not transition.is_valid():
                raise ValueError(
                    "invalid state transition: source, target, or event is empty "
                    f"({transition.source!r} -> {transition.target!r} on {transition.event!r})"
                )

        for transition in transitions:
            index = self.index(transition.source, transition.event)
            if index > -1:
                self._transitions[index] = transition
                logger.debug(f"[TransitionTable] 替换转换规则：{transition.source} --{transition.event}--> {transition.target}")
            else:
                self._transitions.append(transition)
                logger.debug(f"[TransitionTable] 添加转换规则：{transition.source} --{transition.event}--> {transition.target}")

    def clear(self) -> None:
        """清空全部转换规则"""
        self._transitions.clear()

    # ********** 规则查询 **********

    def index(self, source: StateT | None, event: EventT | None) -> int:
        """查找 (source, event) 对应规则的下标

        Returns:
            规则下标，不存在时返回 -1
        """
        for i, transition in enumerate(self._transitions):
            if transition.source == source and transition.event == event:
                return i
        return -1

    def lookup(self, source: StateT | None, event: EventT | None) -> Transition[StateT, EventT] | None:
        """查找 (source, event) 对应的转换规则

        Args:
            source: 起始状态
            event: 触发事件

        Returns:
            匹配的转换规则，不存在时返回None
        """
        index = self.index(source, event)
        if index < 0:
            return None
        return self._transitions[index]

    def all(self) -> list[Transition[StateT, EventT]]:
        """按添加顺序返回全部转换规则的副本"""
        return self._transitions.copy()

    # ********** 派生视图 **********

    def states(self) -> list[StateT]:
        """按首次出现顺序返回所有状态（同一规则中 source 先于 target）"""
        states: list[StateT] = []
        for transition in self._transitions:
            for state in (transition.source, transition.target):
                if state not in states:
                    states.append(state)    # type: ignore[arg-type]
        return states

    def events(self) -> list[EventT]:
        """按首次出现顺序返回所有事件"""
        events: list[EventT] = []
        for transition in self._transitions:
            if transition.event not in events:
                events.append(transition.event)    # type: ignore[arg-type]
        return events

    def terminations(self) -> list[StateT]:
        """返回所有终止状态：只作为 target 出现、从未作为 source 出现的状态"""
        sources: set[StateT] = set()
        targets: list[StateT] = []
        for transition in self._transitions:
            sources.add(transition.source)    # type: ignore[arg-type]
            if transition.target not in targets:
                targets.append(transition.target)    # type: ignore[arg-type]
        return [state for state in targets if state not in sources]
