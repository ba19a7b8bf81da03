from .availability import is_available, overlaps

__all__ = ["is_available", "overlaps"]
