from .videos import VideoStore
from .users import UserDirectory

__all__ = ["VideoStore", "UserDirectory"]
