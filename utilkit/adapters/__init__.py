# utilkit - Adapters (Port Implementations)

from utilkit.adapters.cache_policies import LRUPolicy, TTLPolicy, UnboundedPolicy
from utilkit.adapters.clock import FrozenClock, SystemClock
from utilkit.adapters.timers import ManualTimerAdapter, ThreadingTimerAdapter

__all__ = [
    "FrozenClock",
    "LRUPolicy",
    "ManualTimerAdapter",
    "SystemClock",
    "TTLPolicy",
    "ThreadingTimerAdapter",
    "UnboundedPolicy",
]
