"""flatfsm: a simple non-hierarchical finite state machine based on events"""
from .core.state_machine import (
    BaseStateMachine,
    IStateMachine,
    StateT,
    EventT,
    Action,
    Transition,
    TransitionError,
    is_suspended,
    is_no_transition,
    source,
    target,
)
from .core.pool import StateMachinePool, acquire, release
from .utils.visualize import (
    visualize_graphviz,
    visualize_mermaid_state_diagram,
    visualize_mermaid_flowchart,
)


__all__ = [
    # State machine
    "BaseStateMachine", "IStateMachine", "StateT", "EventT", "Action",
    # Transition
    "Transition", "source", "target",
    # Errors
    "TransitionError", "is_suspended", "is_no_transition",
    # Pool
    "StateMachinePool", "acquire", "release",
    # Visualizers
    "visualize_graphviz", "visualize_mermaid_state_diagram", "visualize_mermaid_flowchart",
]
