from io import StringIO
from typing import Any

from ...core.state_machine import IStateMachine
from ...core.state_machine.const import label
from ...model import get_settings
from ..sort import sort_transitions, sorted_states


def visualize_mermaid_state_diagram(fsm: IStateMachine[Any, Any]) -> str:
    """输出状态机的 Mermaid 状态图描述

    See https://mermaid.js.org/syntax/stateDiagram.html
    """
    start = fsm.get_initial_state()
    if start is None:
        start = fsm.get_current_state()

    buf = StringIO()
    buf.write("stateDiagram-v2\n")
    if start is not None:
        buf.write(f"    [*] --> {label(start)}\n")
    for t in sort_transitions(fsm.get_transitions()):
        buf.write(f"    {label(t.source)} --> {label(t.target)}: {label(t.event)}\n")
    return buf.getvalue()


def visualize_mermaid_flowchart(
    fsm: IStateMachine[Any, Any],
    initial_color: str | None = None,
    current_color: str | None = None,
) -> str:
    """输出状态机的 Mermaid 流程图描述，并高亮初始状态与当前状态

    See https://mermaid.js.org/syntax/flowchart.html

    Args:
        fsm: 状态机实例
        initial_color: 初始状态的填充颜色，None 时使用配置值，空字符串表示不高亮
        current_color: 当前状态的填充颜色，None 时使用配置值，空字符串表示不高亮

    Returns:
        Mermaid flowchart 格式文本
    """
    settings = get_settings()
    if initial_color is None:
        initial_color = settings.flowchart_initial_color
    if current_color is None:
        current_color = settings.flowchart_current_color

    transitions = sort_transitions(fsm.get_transitions())
    states = sorted_states(transitions)
    ids = {state: f"id{i}" for i, state in enumerate(states)}

    buf = StringIO()
    buf.write("graph LR\n")
    for state in states:
        buf.write(f"    {ids[state]}[{label(state)}]\n")
    buf.write("\n")
    for t in transitions:
        buf.write(f"    {ids[t.source]} --> |{label(t.event)}| {ids[t.target]}\n")
    buf.write("\n")

    highlights = [(fsm.get_initial_state(), initial_color), (fsm.get_current_state(), current_color)]
    for state, color in highlights:
        if state in ids and color:
            buf.write(f"    style {ids[state]} fill:{color}\n")
    return buf.getvalue()
