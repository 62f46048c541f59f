from io import StringIO
from typing import Any

from ...core.state_machine import IStateMachine, Transition
from ...core.state_machine.const import label
from ..sort import sort_transitions, sorted_states


def visualize_graphviz(fsm: IStateMachine[Any, Any]) -> str:
    """输出状态机的 Graphviz 描述，初始状态的转换规则排在最前

    Args:
        fsm: 状态机实例

    Returns:
        Graphviz dot 格式文本
    """
    transitions = sort_transitions(fsm.get_transitions())
    initial = fsm.get_initial_state()
    if initial is None:
        initial = fsm.get_current_state()

    buf = StringIO()
    buf.write("digraph fsm {\n")
    _write_transitions(buf, initial, transitions)
    for state in sorted_states(transitions):
        buf.write(f'    "{label(state)}";\n')
    buf.write("}\n")
    return buf.getvalue()


def _write_transitions(buf: StringIO, initial: Any, transitions: list[Transition[Any, Any]]) -> None:
    # 保证初始状态位于图的最上方
    ordered = [t for t in transitions if t.source == initial] + [t for t in transitions if t.source != initial]
    for t in ordered:
        buf.write(f'    "{label(t.source)}" -> "{label(t.target)}" [ label = "{label(t.event)}" ];\n')
    buf.write("\n")
