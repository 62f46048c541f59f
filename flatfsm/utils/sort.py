from typing import Any, Iterable

from ..core.state_machine import Transition
from ..core.state_machine.const import label


def sort_transitions(transitions: Iterable[Transition[Any, Any]]) -> list[Transition[Any, Any]]:
    """按 (source, event) 的文本顺序排序转换规则，返回新列表"""
    return sorted(transitions, key=lambda t: (label(t.source), label(t.event)))


def sorted_states(transitions: Iterable[Transition[Any, Any]]) -> list[Any]:
    """提取转换规则中出现的全部状态并按文本顺序排序"""
    states: list[Any] = []
    for transition in transitions:
        for state in (transition.source, transition.target):
            if state not in states:
                states.append(state)
    return sorted(states, key=label)
