"""Reference data repository."""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import TypeAdapter

from ilp_rest.core.config import DATA_DIR
from ilp_rest.services.reference.models import NamedRegion, Restaurant

logger = logging.getLogger(__name__)

RESTAURANTS_FILE = "restaurants.json"
CENTRAL_AREA_FILE = "centralarea.json"
NO_FLY_ZONES_FILE = "noflyzones.json"

_restaurants_adapter = TypeAdapter(List[Restaurant])
_regions_adapter = TypeAdapter(List[NamedRegion])


class ReferenceDataRepository:
    """Read-only access to the static reference JSON files.

    Every call reads the file again, so edits on disk show up on the next
    request without restarting the service.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """Initialize with optional data directory."""
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR

    def _read(self, file_name: str) -> Any:
        path = self.data_dir / file_name
        logger.debug(f"[REFERENCE] Loading {path}")
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def load_restaurants(self) -> List[Restaurant]:
        """Load the restaurants synchronously, for batch tools."""
        return _restaurants_adapter.validate_python(self._read(RESTAURANTS_FILE))

    async def get_restaurants(self) -> List[Restaurant]:
        """Get all restaurants."""
        return self.load_restaurants()

    async def get_central_area(self) -> NamedRegion:
        """Get the central area polygon."""
        return NamedRegion.model_validate(self._read(CENTRAL_AREA_FILE))

    async def get_no_fly_zones(self) -> List[NamedRegion]:
        """Get all no-fly zones."""
        return _regions_adapter.validate_python(self._read(NO_FLY_ZONES_FILE))
