"""Volume usage endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path

from volstats.docker.errors import MissingContainerIdError
from volstats.models.volume_usage import VolumeUsageReport
from volstats.services.volume_stats_service import VolumeStatsService
from statsapi.dependencies import get_stats_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


def require_container_id(container_id: str = Path(..., min_length=1)) -> str:
    """Resolve the path id, rejecting blank ids before any Docker client is opened."""
    if not container_id.strip():
        raise MissingContainerIdError()
    return container_id


@router.get(
    "/stats",
    response_model=List[VolumeUsageReport],
    response_model_exclude_none=True,
)
def get_all_stats(service: VolumeStatsService = Depends(get_stats_service)):
    """Report volume usage for every running container."""
    return service.collect_all()


@router.get("/stats/")
def get_stats_without_id():
    """Reject a single-container request that names no container."""
    raise MissingContainerIdError()


@router.get(
    "/stats/{container_id}",
    response_model=List[VolumeUsageReport],
    response_model_exclude_none=True,
)
def get_container_stats(
    container_id: str = Depends(require_container_id),
    service: VolumeStatsService = Depends(get_stats_service),
):
    """Report volume usage for a single container by id or name."""
    return service.collect_container(container_id)
