"""Non-hierarchical finite state machine driven by events"""
from .base import BaseStateMachine
from .const import StateT, EventT, Action, StateCallback, TransitionCallback
from .error import TransitionError, is_suspended, is_no_transition
from .interface import IStateMachine
from .registry import CallbackRegistry
from .table import TransitionTable
from .transition import Transition, source, target


__all__ = [
    "BaseStateMachine",
    "IStateMachine",
    "StateT",
    "EventT",
    "Action",
    "StateCallback",
    "TransitionCallback",
    "TransitionError",
    "is_suspended",
    "is_no_transition",
    "CallbackRegistry",
    "TransitionTable",
    "Transition",
    "source",
    "target",
]
