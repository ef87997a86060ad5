"""Video listing and publishing routes."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from aurevo.models.user import User
from aurevo.models.video import Video, CreateVideoRequest, CreateVideoResponse
from aurevo.store import VideoStore
from aurevo.app.auth import AuthChain
from aurevo.app.dependencies import get_video_store

logger = logging.getLogger(__name__)


def create_router(chain: AuthChain) -> APIRouter:
    """Build the /videos routes against the given auth chain."""
    router = APIRouter(prefix="/videos", tags=["videos"])

    @router.get("", response_model=list[Video])
    def read_videos(store: VideoStore = Depends(get_video_store)) -> list[Video]:
        """Get every video, newest first. Public."""
        return store.list()

    @router.post("", response_model=CreateVideoResponse)
    def create_video(
        body: Any = Body(None),
        store: VideoStore = Depends(get_video_store),
        user: User = Depends(chain.creator),
    ) -> CreateVideoResponse:
        """Publish a video. Creators only.

        The new video goes to the front of the list.
        """
        try:
            request = CreateVideoRequest.from_body(body)
        except ValidationError as e:
            raise RequestValidationError(e.errors())
        if not request.has_required_fields:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Title and playbackUrl required",
            )
        video = store.add(
            title=request.title_text,
            playback_url=request.playback_url_text,
            publisher=request.publisher,
            producer=request.producer,
            genre=request.genre,
            age=request.age,
            external=request.external,
        )
        logger.info(f"User {user.sub} published video {video.id}")
        return CreateVideoResponse(id=video.id)

    return router
