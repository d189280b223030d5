"""Service metadata endpoints: build, runtime and contact info."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from src.core.config import Settings, get_settings
from src.presentation.schemas import ContactInfoSchema

info_router = APIRouter()


@info_router.get(
    "/build-info",
    response_model=str,
    summary="Get Build information",
    description="Build version deployed into the loans service.",
)
async def get_build_info(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    return app_settings.build_version


@info_router.get(
    "/java-version",
    response_model=Optional[str],
    summary="Get runtime home",
    description="Value of the JAVA_HOME environment variable on the host, if set.",
)
async def get_java_version(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> Optional[str]:
    return app_settings.java_home


@info_router.get(
    "/contact-info",
    response_model=ContactInfoSchema,
    summary="Get Contact Info",
    description="Contact details that can be reached out to in case of any issues.",
)
async def get_contact_info(
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> ContactInfoSchema:
    contact = app_settings.contact_info
    return ContactInfoSchema(
        message=contact.message,
        contact_email=contact.contact_email,
        contact_numbers=list(contact.contact_numbers),
    )
