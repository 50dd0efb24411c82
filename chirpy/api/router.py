# chirpy/api/router.py
from fastapi import APIRouter
from chirpy.api.routes import admin, auth, chirps, health, polka, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/api", tags=["health"])
api_router.include_router(admin.router, tags=["admin"])
api_router.include_router(users.router, prefix="/api/users", tags=["users"])
api_router.include_router(auth.router, prefix="/api", tags=["auth"])
api_router.include_router(chirps.router, prefix="/api/chirps", tags=["chirps"])
api_router.include_router(polka.router, prefix="/api/polka", tags=["polka"])
