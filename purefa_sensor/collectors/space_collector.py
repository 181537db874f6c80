import logging

from purefa_sensor.collectors.collector import FlashArrayCollector
from purefa_sensor.schema.models import SpaceSnapshot

LOG = logging.getLogger(__name__)


class SpaceCollector(FlashArrayCollector):
    """Collects array-wide capacity and usage."""

    category = "space"
    path = "arrays/space"

    def collect(self) -> SpaceSnapshot:
        item = self.first_item()
        try:
            snapshot = SpaceSnapshot.from_item(item)
        except (TypeError, ValueError) as e:
            # pydantic's ValidationError is a ValueError
            raise self._fail(f"unexpected response data: {e}") from e

        LOG.info(f"Space: {snapshot.total_used} of {snapshot.capacity} bytes used")
        return snapshot
