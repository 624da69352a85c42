from fastapi import APIRouter

from errorstore.api.routers import errors

api_router = APIRouter()

api_router.include_router(errors.router)
