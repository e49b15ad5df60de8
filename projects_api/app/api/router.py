"""
Top‑level router for the API.

Routes are mounted at the root so the public paths are ``/projects``
and ``/projects/{name}``.
"""

from fastapi import APIRouter

from .endpoints import projects

router = APIRouter()

router.include_router(projects.router, prefix="/projects", tags=["projects"])
