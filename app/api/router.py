from fastapi import APIRouter

from app.api.routers import demo

api_router = APIRouter()

api_router.include_router(demo.router)
