import logging
from typing import List

from purefa_sensor.collectors.collector import FlashArrayCollector
from purefa_sensor.schema.models import HardwareStatusRecord


class HardwareCollector(FlashArrayCollector):
    """Collects the status of every hardware component."""

    category = "hardware"
    path = "hardware"

    def collect(self) -> List[HardwareStatusRecord]:
        records = [self.validate(HardwareStatusRecord, item) for item in self.get_items()]
        logging.getLogger(__name__).info(f"Collected {len(records)} hardware records")
        return records
