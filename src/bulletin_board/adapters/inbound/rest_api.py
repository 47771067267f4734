"""FastAPI REST adapter for the Bulletin Board.

Maps HTTP verbs, paths and query strings onto PostRepositoryPort calls and
renders posts and errors as JSON.

Endpoints:
    GET    /v1/api/list?page=&per_page=  - One page of posts
    GET    /v1/api/detail/{id}           - A single post
    POST   /v1/api/create                - Create a post
    PUT    /v1/api/update/{id}           - Replace title and content
    DELETE /v1/api/delete/{id}           - Delete a post

Errors are rendered as {"code": int, "message": str, "detail": str} with the
HTTP status equal to code.

Usage:
    from bulletin_board.adapters.inbound.rest_api import create_rest_router

    app.include_router(create_rest_router(repository))
    register_error_handlers(app)

References:
    - ports/inbound (PostRepositoryPort)
    - DESIGN.md (REST adapter)
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from bulletin_board import __version__
from bulletin_board.adapters.inbound.parsing import parse_page_params, parse_post_id
from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.value_objects.errors import (
    InvalidArgumentError,
    PostError,
    unexpected_error,
)
from bulletin_board.infrastructure.logging import get_logger
from bulletin_board.ports.inbound import PostRepositoryPort

logger = get_logger("rest_api")


class PostInput(BaseModel):
    """Request body for create and update.

    Missing fields read as empty strings; create rejects them, update
    stores them as given.
    """

    title: str = Field(default="", description="Post title")
    content: str = Field(default="", description="Post body")


class PostResponse(BaseModel):
    """A post as served by the REST API."""

    id: int
    title: str
    content: str

    @classmethod
    def from_post(cls, post: Post) -> PostResponse:
        return cls(**post.to_dict())


class MessageResponse(BaseModel):
    """Plain success message."""

    message: str


class ErrorResponse(BaseModel):
    """Error body shared by every failing endpoint."""

    code: int
    message: str
    detail: str


_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Post not found"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}


def create_rest_router(repository: PostRepositoryPort, prefix: str = "/v1/api") -> APIRouter:
    """Create the REST router for post management.

    Args:
        repository: Repository every endpoint delegates to.
        prefix: Path prefix for the endpoints.

    Returns:
        Router to include in a FastAPI application.
    """
    router = APIRouter(prefix=prefix, tags=["Posts"], responses=_ERROR_RESPONSES)

    @router.get("/list", response_model=list[PostResponse])
    async def list_posts(
        page: Optional[str] = None,
        per_page: Optional[str] = None,
    ) -> list[PostResponse]:
        """List one page of posts in insertion order."""
        page_number, page_size = parse_page_params(page, per_page)
        posts = repository.list(page_number, page_size)
        return [PostResponse.from_post(p) for p in posts]

    @router.get("/detail/{post_id}", response_model=PostResponse)
    async def get_post(post_id: str) -> PostResponse:
        """Get a single post."""
        return PostResponse.from_post(repository.get(parse_post_id(post_id)))

    @router.post("/create", response_model=PostResponse)
    async def create_post(body: PostInput) -> PostResponse:
        """Create a post; the id is assigned by the server."""
        return PostResponse.from_post(repository.create(body.title, body.content))

    @router.put("/update/{post_id}", response_model=PostResponse)
    async def update_post(post_id: str, body: PostInput) -> PostResponse:
        """Replace the title and content of a post."""
        parsed_id = parse_post_id(post_id)
        return PostResponse.from_post(repository.update(parsed_id, body.title, body.content))

    @router.delete("/delete/{post_id}", response_model=MessageResponse)
    async def delete_post(post_id: str) -> MessageResponse:
        """Delete a post."""
        repository.delete(parse_post_id(post_id))
        return MessageResponse(message="Post deleted")

    return router


def _validation_detail(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


def error_response(error: PostError) -> JSONResponse:
    """Render a PostError as the REST error body."""
    return JSONResponse(status_code=error.code, content=error.to_dict())


async def post_error_handler(request: Request, exc: PostError) -> JSONResponse:
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are a 400 in the shared error shape, not FastAPI's 422."""
    return error_response(
        InvalidArgumentError("Invalid request parameters", _validation_detail(exc))
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_request_error",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return error_response(unexpected_error())


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers translating failures into the error body."""
    app.add_exception_handler(PostError, post_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def create_app(repository: PostRepositoryPort) -> FastAPI:
    """Create a FastAPI application serving only the REST endpoints.

    Args:
        repository: Repository to serve.

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="Bulletin Board REST API",
        description="Post management over REST",
        version=__version__,
    )
    app.include_router(create_rest_router(repository))
    register_error_handlers(app)
    return app
