# utilkit - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from utilkit.core.ports.time import ClockPort

__all__ = [
    "ClockPort",
]
