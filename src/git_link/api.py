"""git-link HTTP service."""

import os
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from git_link.core.config import get_config
from git_link.core.errors import (
    FormatError,
    GitLinkError,
    RepositoryNotFoundError,
    UnsupportedAccessPointError,
    VcsError,
)
from git_link.core.locator import find_repository
from git_link.core.utils import configure_logging
from git_link.handler.links import LinkHandler

app = FastAPI(
    title="git-link API",
    description="Resolve file-at-revision links to cached local files",
    version="0.1.0",
)

_handler: Optional[LinkHandler] = None


def get_handler() -> LinkHandler:
    """Get or create the link handler."""
    global _handler
    if _handler is None:
        config = get_config()
        configure_logging(config.log_level)
        _handler = LinkHandler(config=config)
    return _handler


def set_handler(handler: Optional[LinkHandler]) -> None:
    """Replace the link handler (None resets to the environment default)."""
    global _handler
    _handler = handler


_ERROR_STATUS = {
    FormatError: 400,
    UnsupportedAccessPointError: 400,
    RepositoryNotFoundError: 404,
    VcsError: 502,
}


@app.exception_handler(GitLinkError)
async def handle_git_link_error(request: Request, exc: GitLinkError) -> JSONResponse:
    status = next(
        (code for kind, code in _ERROR_STATUS.items() if isinstance(exc, kind)), 500
    )
    body: Dict[str, Any] = {"error": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, VcsError):
        body["output"] = exc.output
        body["returncode"] = exc.returncode
    return JSONResponse(status_code=status, content=body)


class LinkOpenRequest(BaseModel):
    reference: str


class FileLinkRequest(BaseModel):
    path: str
    object_expression: str
    access_point: str = "localhost"


class StoreLinkRequest(BaseModel):
    path: str


class PathResponse(BaseModel):
    path: str


class StoreLinkResponse(BaseModel):
    link: Optional[str]


class RepositoryResponse(BaseModel):
    inside: bool
    root: Optional[str] = None
    relative_path: Optional[str] = None


class BranchResponse(BaseModel):
    branch: Optional[str]


class CacheStatsResponse(BaseModel):
    cache_root: str
    total_entries: int
    total_bytes: int


@app.post("/api/links/open")
def open_link(request: LinkOpenRequest) -> PathResponse:
    """Materialize a bare-form reference."""
    path = get_handler().resolve_and_open(request.reference)
    return PathResponse(path=str(path))


@app.post("/api/links/file")
def open_file_link(request: FileLinkRequest) -> PathResponse:
    """Materialize a file as of a revision."""
    path = get_handler().resolve_from_file_path(
        request.path, request.object_expression, request.access_point
    )
    return PathResponse(path=str(path))


@app.post("/api/links/store")
def store_link(request: StoreLinkRequest) -> StoreLinkResponse:
    """Author a link for a file inside a repository."""
    return StoreLinkResponse(link=get_handler().store_link(request.path))


@app.get("/api/repository")
def repository(path: str) -> RepositoryResponse:
    """Locate the repository enclosing a path."""
    handler = get_handler()
    try:
        location = find_repository(path, handler.config.metadata_dirname)
    except RepositoryNotFoundError:
        return RepositoryResponse(inside=False)
    return RepositoryResponse(
        inside=True, root=str(location.root), relative_path=location.relative_path
    )


@app.get("/api/repository/branch")
def current_branch(metadata_path: str) -> BranchResponse:
    """Current branch of a repository."""
    return BranchResponse(branch=get_handler().current_branch_name(metadata_path))


@app.get("/api/cache/stats")
def get_cache_stats() -> CacheStatsResponse:
    """Get cache statistics."""
    return CacheStatsResponse(**get_handler().cache.stats())


@app.delete("/api/cache")
def clear_cache() -> Dict[str, Any]:
    """Remove all cached objects."""
    removed = get_handler().cache.clear()
    return {"removed": removed, "message": "Cache cleared successfully"}


@app.get("/health")
async def health_check():
    """Health check."""
    return {"status": "healthy", "service": "git-link-api"}


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("APP_HOST", "127.0.0.1")
    port = int(os.getenv("APP_PORT", "8080"))

    uvicorn.run(
        "git_link.api:app",
        host=host,
        port=port,
        reload=True,
    )
