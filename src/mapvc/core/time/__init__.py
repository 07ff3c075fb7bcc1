from mapvc.core.time.abc import Time
from mapvc.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
