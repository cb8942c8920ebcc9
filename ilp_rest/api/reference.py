"""Reference data endpoints: restaurants, central area and no-fly zones."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ilp_rest.core.dependencies import get_reference_repository
from ilp_rest.services.reference.models import NamedRegion, Restaurant
from ilp_rest.services.reference.repository import ReferenceDataRepository


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/restaurants", response_model=List[Restaurant])
async def get_restaurants(
    repository: ReferenceDataRepository = Depends(get_reference_repository),
):
    """Get the restaurants in the system."""
    try:
        restaurants = await repository.get_restaurants()
    except Exception as e:
        logger.error(
            f"[RESTAURANTS] Error loading restaurants - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading restaurants: {str(e)}")

    logger.info(f"[RESTAURANTS] Returning {len(restaurants)} restaurants")
    return restaurants


@router.get("/centralArea", response_model=NamedRegion)
@router.get("/centralarea", response_model=NamedRegion, include_in_schema=False)
async def get_central_area(
    repository: ReferenceDataRepository = Depends(get_reference_repository),
):
    """Get the central area as a named region."""
    try:
        return await repository.get_central_area()
    except Exception as e:
        logger.error(
            f"[CENTRAL AREA] Error loading central area - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading central area: {str(e)}")


@router.get("/noFlyZones", response_model=List[NamedRegion])
@router.get("/noflyzones", response_model=List[NamedRegion], include_in_schema=False)
async def get_no_fly_zones(
    repository: ReferenceDataRepository = Depends(get_reference_repository),
):
    """Get the defined no-fly zones as named regions."""
    try:
        zones = await repository.get_no_fly_zones()
    except Exception as e:
        logger.error(
            f"[NO FLY ZONES] Error loading no-fly zones - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        raise HTTPException(status_code=500, detail=f"Error loading no-fly zones: {str(e)}")

    logger.info(f"[NO FLY ZONES] Returning {len(zones)} zones")
    return zones
