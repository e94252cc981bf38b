"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import search, report, system

api_router = APIRouter()

api_router.include_router(search.router)
api_router.include_router(report.router)
api_router.include_router(system.router)
