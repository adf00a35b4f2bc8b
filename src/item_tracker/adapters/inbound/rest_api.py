"""REST API adapter for the item tracker.

Endpoints (under the configured prefix, ``/api/v1`` by default):
    GET  /items  - List item titles
    POST /items  - Create an item
    POST /search - Full-text search over titles
    GET  /health - Health check

Status codes are decided here; the coordinator only raises its own
errors. Endpoints are plain functions so FastAPI runs the blocking store
calls in its threadpool.

Usage:
    from item_tracker.adapters.inbound.rest_api import create_app

    app = create_app(container.coordinator)
    # Run with: uvicorn module:app --host 0.0.0.0 --port 3000
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from item_tracker import __version__
from item_tracker.application import ItemCoordinator
from item_tracker.domain.errors import CreateFailed, InvalidTitle, StoreUnavailable


class CreateItemRequest(BaseModel):
    """Request to create an item."""

    title: str = Field(..., description="Item title")


class ItemResponse(BaseModel):
    """An item title."""

    title: str


class SearchRequest(BaseModel):
    """Request to search item titles."""

    model_config = ConfigDict(populate_by_name=True)

    search_text: str = Field(..., alias="searchText", description="Free-text query")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


def create_app(coordinator: ItemCoordinator, api_prefix: str = "/api/v1") -> FastAPI:
    """Create a FastAPI application around an item coordinator.

    Args:
        coordinator: The coordinator serving every request.
        api_prefix: Prefix the item routes are mounted under.

    Returns:
        A configured FastAPI application.
    """
    app = FastAPI(
        title="Item Tracker API",
        description="Item tracking over a durable store, a title cache and a search index",
        version=__version__,
    )
    router = APIRouter()

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=__version__)

    @router.get("/items", response_model=list[ItemResponse], tags=["Items"])
    def list_items() -> list[ItemResponse]:
        """List every item title."""
        try:
            titles = coordinator.list_items()
        except StoreUnavailable:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Failed to fetch items",
            )
        return [ItemResponse(title=item.title) for item in titles]

    @router.post(
        "/items",
        response_model=ItemResponse,
        status_code=status.HTTP_201_CREATED,
        tags=["Items"],
    )
    def create_item(request: CreateItemRequest) -> ItemResponse:
        """Create an item."""
        try:
            title = coordinator.create_item(request.title)
        except InvalidTitle as e:
            raise HTTPException(status_code=422, detail=str(e))
        except CreateFailed as e:
            if e.duplicate:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"Item {e.title!r} already exists",
                )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create item",
            )
        return ItemResponse(title=title)

    @router.post("/search", tags=["Search"])
    def search_items(request: SearchRequest) -> list[dict[str, Any]]:
        """Search item titles. Backend failures return an empty list."""
        return coordinator.search_items(request.search_text)

    app.include_router(router, prefix=api_prefix)

    return app


def run_server(
    coordinator: ItemCoordinator,
    host: str = "0.0.0.0",
    port: int = 3000,
    api_prefix: str = "/api/v1",
) -> None:
    """Run the REST API server.

    Args:
        coordinator: The item coordinator.
        host: Host to bind to.
        port: Port to bind to.
        api_prefix: Prefix the item routes are mounted under.
    """
    import uvicorn

    app = create_app(coordinator, api_prefix=api_prefix)
    uvicorn.run(app, host=host, port=port, log_config=None)
