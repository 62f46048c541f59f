from .state_machine import BaseStateMachine, IStateMachine, Transition, TransitionError
from .pool import StateMachinePool, acquire, release, get_pool

__all__ = [
    "BaseStateMachine",
    "IStateMachine",
    "Transition",
    "TransitionError",
    "StateMachinePool",
    "acquire",
    "release",
    "get_pool",
]
