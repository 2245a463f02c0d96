from fastapi import APIRouter

from inventory.api.routes import items

api_router = APIRouter()
api_router.include_router(items.router)
