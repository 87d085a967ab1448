from .bus import RefreshBus, RefreshEvent

__all__ = ["RefreshBus", "RefreshEvent"]
