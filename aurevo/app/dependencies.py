from fastapi import Request

from aurevo.store import VideoStore, UserDirectory


def get_video_store(request: Request) -> VideoStore:
    """Get the video store owned by the running app."""
    return request.app.state.videos


def get_user_directory(request: Request) -> UserDirectory:
    """Get the user directory owned by the running app."""
    return request.app.state.users
