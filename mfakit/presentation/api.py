from fastapi import APIRouter

from mfakit.presentation.routers.v1.mfa import router as mfa_router
from mfakit.presentation.routes.health import router as health_router

api = APIRouter()

# Add all v1 routers here
routers = (mfa_router,)
for router in routers:
    api.include_router(router, prefix="/v1")

api.include_router(health_router)
