# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
Pure transforms from collected records to PRTG channels. No I/O here.
"""

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from purefa_sensor import channels
from purefa_sensor.errors import CollectionError
from purefa_sensor.schema.models import HardwareStatusRecord, PerformanceSnapshot, SpaceSnapshot

BYTES_PER_TB = 2 ** 40
USEC_PER_MS = 1000

STATUS_OK = "ok"
STATUS_NOT_INSTALLED = "not_installed"

TB_DECIMALS = 3
PERCENT_DECIMALS = 2
MS_DECIMALS = 3


def count_hardware_status(records: Iterable[HardwareStatusRecord]) -> Tuple[int, int, int]:
    """Return (ok, not_installed, everything else) counts. Status match is exact."""
    by_status = Counter(record.status for record in records)
    ok = by_status.get(STATUS_OK, 0)
    not_installed = by_status.get(STATUS_NOT_INSTALLED, 0)
    not_ok = sum(by_status.values()) - ok - not_installed
    return ok, not_installed, not_ok


def bytes_to_tb(value: float) -> float:
    return round(value / BYTES_PER_TB, TB_DECIMALS)


def usec_to_ms(value: float) -> float:
    return round(value / USEC_PER_MS, MS_DECIMALS)


def free_space(space: SpaceSnapshot) -> Tuple[float, float]:
    """
    Return free space as (terabytes, percent of capacity).

    Raises:
        CollectionError: capacity is zero or negative
    """
    if space.capacity <= 0:
        raise CollectionError("space", f"array reported a capacity of {space.capacity} bytes")
    free_bytes = space.capacity - space.total_used
    percent = round(free_bytes / space.capacity * 100, PERCENT_DECIMALS)
    return bytes_to_tb(free_bytes), percent


def build_channels(hardware: List[HardwareStatusRecord],
                   performance: PerformanceSnapshot,
                   space: SpaceSnapshot) -> List[Dict]:
    """
    Build the twelve PRTG channels in their fixed order.

    Args:
        hardware: All hardware component records
        performance: Array-wide performance snapshot
        space: Array-wide space snapshot

    Returns:
        List of channel dicts, ordered as channels.CHANNEL_ORDER
    """
    ok, not_installed, not_ok = count_hardware_status(hardware)
    free_tb, free_percent = free_space(space)

    values = {
        channels.HARDWARE_OK: ok,
        channels.HARDWARE_NOT_INSTALLED: not_installed,
        channels.HARDWARE_NOT_OK: not_ok,
        channels.VOLUMES: bytes_to_tb(space.volumes),
        channels.TOTAL_USED: bytes_to_tb(space.total_used),
        channels.TOTAL_CAPACITY: bytes_to_tb(space.capacity),
        channels.FREE_SPACE: free_tb,
        channels.FREE_SPACE_PERCENT: free_percent,
        channels.WRITE_IOPS: performance.writes_per_sec,
        channels.READ_IOPS: performance.reads_per_sec,
        channels.WRITE_LATENCY: usec_to_ms(performance.usec_per_write_op),
        channels.READ_LATENCY: usec_to_ms(performance.usec_per_read_op),
    }
    return [channels.make_channel(name, values[name]) for name in channels.CHANNEL_ORDER]
