from realtime.manager import hub

__all__ = ["hub"]
