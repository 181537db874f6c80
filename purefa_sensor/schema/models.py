# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

from typing import Any, Dict, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ArrayItem(BaseModel):
    """Base for REST items: unknown fields are ignored, numbers coerced."""
    model_config = ConfigDict(extra='ignore')


class HardwareStatusRecord(ArrayItem):
    """One physical component from /hardware."""
    name: Optional[str] = None
    type: Optional[str] = None
    status: str


class PerformanceSnapshot(ArrayItem):
    """Array-wide IO figures from /arrays/performance. Latencies are in microseconds."""
    writes_per_sec: Union[int, float]
    reads_per_sec: Union[int, float]
    usec_per_write_op: float
    usec_per_read_op: float


class SpaceSnapshot(ArrayItem):
    """
    Array-wide space figures from /arrays/space, all in bytes.

    REST 2.x nests most of these under ``space``; use from_item() to flatten.
    Older releases report ``total_physical`` instead of ``total_used`` and
    expose volume space as ``unique``.
    """
    volumes: int = Field(validation_alias=AliasChoices('volumes', 'unique'))
    total_used: int = Field(validation_alias=AliasChoices('total_used', 'total_physical'))
    capacity: int

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "SpaceSnapshot":
        flat = dict(item.get('space') or {})
        flat['capacity'] = item.get('capacity')
        return cls.model_validate(flat)
