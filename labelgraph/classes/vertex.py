"""
Vertex representation shared by both graph models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class pyvertex:
    """
    A labeled vertex addressed by its 1-based index.

    The label is opaque text taken verbatim from the build input and never
    changes after the graph is built.
    """
    lVertexID: int
    sLabel: str

    def __str__(self) -> str:
        return self.sLabel
