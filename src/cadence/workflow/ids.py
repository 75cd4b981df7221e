"""Identifier generation for graph elements."""

import uuid


class IdGenerator:
    """Issues ids unique within a build and across builds.

    Each generator carries a random token; a counter keeps ids minted in the
    same build distinct even when created back to back.
    """

    def __init__(self, token: str | None = None):
        self.token = token or uuid.uuid4().hex[:8]
        self._counter = 0

    def next(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}_{self.token}_{self._counter}"

    def edge(self, source: str, target: str, suffix: str | None = None) -> str:
        edge_id = f"edge-{source}-{target}"
        return f"{edge_id}-{suffix}" if suffix else edge_id
