from fastapi import APIRouter

from .loans import loans_router
from .info import info_router
from .health import health_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(loans_router, tags=["Loans"])
router.include_router(info_router, tags=["Info"])
