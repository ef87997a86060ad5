"""Static front end with single-page-app fallback.

Registered after every API router so it only sees unmatched paths.
"""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import FileResponse

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"
INDEX_FILE = "index.html"


def resolve_public_file(path: str, public_dir: Path = PUBLIC_DIR) -> Optional[Path]:
    """Map a request path to a file under public_dir.

    Tries the path as given, then with '.html' appended. Anything that
    resolves outside public_dir is ignored.
    """
    root = public_dir.resolve()
    relative = path.lstrip("/")
    if not relative:
        return None
    for candidate in (root / relative, root / f"{relative}.html"):
        resolved = candidate.resolve()
        if resolved.is_relative_to(root) and resolved.is_file():
            return resolved
    return None


def create_router(public_dir: Path = PUBLIC_DIR) -> APIRouter:
    router = APIRouter(include_in_schema=False)

    @router.get("/{path:path}")
    def serve_front_end(path: str) -> FileResponse:
        """Serve a public asset, or index.html for anything else."""
        found = resolve_public_file(path, public_dir)
        return FileResponse(found or public_dir / INDEX_FILE)

    return router
