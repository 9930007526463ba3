# calsun/api/v1/api.py
from fastapi import APIRouter
from calsun.api.v1.endpoints import sun_times

api_router = APIRouter()
api_router.include_router(sun_times.router, prefix="/sun", tags=["Sun"])
