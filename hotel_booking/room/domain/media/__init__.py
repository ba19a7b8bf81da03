from .media_store import MediaStore, Photo

__all__ = ["MediaStore", "Photo"]
