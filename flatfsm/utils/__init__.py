from .sort import sort_transitions, sorted_states

__all__ = ["sort_transitions", "sorted_states"]
