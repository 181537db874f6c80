import logging

from purefa_sensor.collectors.collector import FlashArrayCollector
from purefa_sensor.schema.models import PerformanceSnapshot


class PerformanceCollector(FlashArrayCollector):
    """Collects the current array-wide IO performance."""

    category = "performance"
    path = "arrays/performance"

    def __init__(self, session):
        super().__init__(session)
        self.logger = logging.getLogger(__name__)

    def collect(self) -> PerformanceSnapshot:
        snapshot = self.validate(PerformanceSnapshot, self.first_item())
        self.logger.info(
            f"Performance: {snapshot.writes_per_sec} writes/s, {snapshot.reads_per_sec} reads/s"
        )
        return snapshot
