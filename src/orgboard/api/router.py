"""Master API router mounted at /api."""

from fastapi import APIRouter

from orgboard.api.routes import activity_logs, auth, health, projects, tasks

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(tasks.router)
api_router.include_router(activity_logs.router)
