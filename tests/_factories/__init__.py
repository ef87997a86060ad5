from .video import VideoFactory
from .claims import ClaimsFactory

__all__ = ["VideoFactory", "ClaimsFactory"]
