"""
errors.py — Graph & Run Errors
===============================
Typed exceptions shared by the graph model and the stepper.

    GraphError
     ├── UnknownNodeError     – node not in the graph (fatal, raised early)
     ├── MalformedGraphError  – asymmetric / invalid weights (fatal at build)
     └── NoPathError          – backtracking could not reach the start node

NoPathError never escapes a running stepper: it is converted into
RunState.UNREACHABLE with an empty final path.
"""

from typing import Any, Optional


class GraphError(Exception):
    """Base class for everything the graph layer raises."""


class UnknownNodeError(GraphError, KeyError):
    def __init__(self, node: Any, message: Optional[str] = None):
        self.node = node
        super().__init__(message or f"Unknown node: {node!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MalformedGraphError(GraphError, ValueError):
    pass


class NoPathError(GraphError):
    def __init__(self, start: Any, end: Any):
        self.start = start
        self.end   = end
        super().__init__(f"No path from {start!r} to {end!r}")
