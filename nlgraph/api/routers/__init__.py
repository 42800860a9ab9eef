"""API sub-routers assembled into a single api_router."""

from fastapi import APIRouter

from nlgraph.api.routers.mock_data import router as mock_data_router
from nlgraph.api.routers.nlq import router as nlq_router

api_router = APIRouter()

api_router.include_router(nlq_router, tags=["nlq"])

__all__ = ["api_router", "mock_data_router"]
