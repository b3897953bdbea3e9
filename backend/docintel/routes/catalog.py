"""
Catalog Routes Module

Read-only endpoints exposing the stage requirement catalog so the UI can show
which documents a startup is expected to upload.
"""

from fastapi import APIRouter, Depends

from ..schemas import StageListResponse, StageRequirements
from ..services.catalog import StageCatalog
from ..utils.logger import api_logger as logger
from .dependencies import get_stage_catalog

router = APIRouter(tags=["Catalog"])


@router.get("/stages", response_model=StageListResponse)
async def list_stages(catalog: StageCatalog = Depends(get_stage_catalog)):
    """List the canonical stages and the fixed data-room categories."""
    return StageListResponse(
        stages=catalog.stages,
        data_room_categories=list(catalog.data_room_categories),
    )


@router.get("/stages/{stage}", response_model=StageRequirements)
async def get_stage_requirements(stage: str, catalog: StageCatalog = Depends(get_stage_catalog)):
    """
    Get the documents expected for a stage.

    Legacy labels are accepted; the response carries the canonical stage.
    """
    requirements = catalog.requirements_for(stage)
    logger.info(f"Catalog lookup for {stage!r} resolved to {requirements.stage.value}")
    return requirements
