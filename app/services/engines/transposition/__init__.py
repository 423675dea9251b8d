"""Transposition cipher engines."""

from app.services.engines.transposition.columnar import ColumnarEngine
from app.services.engines.transposition.rail_fence import RailFenceEngine

__all__ = [
    "ColumnarEngine",
    "RailFenceEngine",
]
