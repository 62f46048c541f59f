from .graphviz import visualize_graphviz
from .mermaid import visualize_mermaid_state_diagram, visualize_mermaid_flowchart

__all__ = [
    "visualize_graphviz",
    "visualize_mermaid_state_diagram",
    "visualize_mermaid_flowchart",
]
