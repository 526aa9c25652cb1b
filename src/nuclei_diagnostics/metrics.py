"""
Metrics collector handle carried by `SystemDiagnostics`.

Collectors are opaque to this package: no operations are required, the
handle is stored and returned unchanged.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsCollector(Protocol):
    """Marker protocol for metrics back-ends."""
