"""In-memory video storage."""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from aurevo.models.video import Video

logger = logging.getLogger(__name__)

WELCOME_VIDEO_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class VideoStore:
    """Ordered list of videos, most recent first.

    Lives as long as the process. Nothing is ever updated or deleted.
    """

    def __init__(
        self,
        seed: bool = True,
        clock: Callable[[], int] = _now_ms,
    ):
        self._videos: list[Video] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._last_id = 0
        if seed:
            self._videos.append(
                Video(
                    id="1",
                    title="Welcome to aurevo",
                    publisher="aurevo",
                    playbackUrl=WELCOME_VIDEO_URL,
                    createdAt=datetime.now(timezone.utc),
                )
            )

    def list(self) -> list[Video]:
        """Get all videos, newest first."""
        return list(self._videos)

    def __len__(self) -> int:
        return len(self._videos)

    def _next_id(self) -> str:
        """Timestamp-derived id, bumped past the last one issued if the clock
        hasn't moved. Caller must hold the lock."""
        candidate = self._clock()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def add(
        self,
        title: str,
        playback_url: str,
        publisher: Optional[str] = None,
        producer: Optional[str] = None,
        genre: Optional[str] = None,
        age: Optional[str] = None,
        external: Optional[bool] = None,
    ) -> Video:
        """Create a video and put it at the front of the list.

        Args:
            title: Display title. Must be non-empty.
            playback_url: Where the video plays from. Must be non-empty.

        Returns:
            The stored Video.
        """
        if not title or not playback_url:
            raise ValueError("title and playback_url are required")
        with self._lock:
            video = Video(
                id=self._next_id(),
                title=title,
                publisher=publisher or "",
                producer=producer or "",
                genre=genre or "",
                age=age or "",
                playbackUrl=playback_url,
                external=bool(external),
                createdAt=datetime.now(timezone.utc),
            )
            self._videos.insert(0, video)
        logger.info(f"Stored video id={video.id} title={video.title!r}")
        return video
