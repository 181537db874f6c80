"""Tests for the channel transforms."""
import pytest

from purefa_sensor import channels
from purefa_sensor.aggregator import (
    build_channels,
    bytes_to_tb,
    count_hardware_status,
    free_space,
    usec_to_ms,
)
from purefa_sensor.errors import CollectionError
from purefa_sensor.schema.models import HardwareStatusRecord, PerformanceSnapshot, SpaceSnapshot
from tests.conftest import TIB


def _hardware(*statuses):
    return [HardwareStatusRecord(name=f"HW{i}", status=s) for i, s in enumerate(statuses)]


def _space(capacity, total_used, volumes=0):
    return SpaceSnapshot(capacity=capacity, total_used=total_used, volumes=volumes)


def _idle_performance():
    return PerformanceSnapshot(writes_per_sec=0, reads_per_sec=0,
                               usec_per_write_op=0, usec_per_read_op=0)


def _by_name(result):
    return {channel["channel"]: channel for channel in result}


def test_hardware_counts_group_by_exact_status():
    assert count_hardware_status(_hardware("ok", "ok", "not_installed", "failed")) == (2, 1, 1)


def test_hardware_counts_treat_other_spellings_as_not_ok():
    # Status match is exact; anything that is not "ok"/"not_installed" counts as a fault
    assert count_hardware_status(_hardware("OK", "degraded", "unused", "not installed")) == (0, 0, 4)


def test_hardware_counts_empty_list():
    assert count_hardware_status([]) == (0, 0, 0)


def test_bytes_to_tb_uses_binary_terabytes():
    assert bytes_to_tb(TIB) == 1.0
    assert bytes_to_tb(TIB // 2) == 0.5
    assert bytes_to_tb(0) == 0.0


def test_usec_to_ms():
    assert usec_to_ms(2500) == 2.5
    assert usec_to_ms(0) == 0.0


def test_free_space_ten_tib_capacity_four_used():
    free_tb, percent = free_space(_space(10 * TIB, 4 * TIB))
    assert free_tb == 6.0
    assert percent == 60.0


def test_free_space_zero_capacity_is_a_space_error():
    with pytest.raises(CollectionError) as exc_info:
        free_space(_space(0, 0))
    assert exc_info.value.category == "space"
    assert "capacity of 0 bytes" in exc_info.value.message


def test_build_channels_order_and_names():
    result = build_channels(
        _hardware("ok"),
        _idle_performance(),
        _space(10 * TIB, 4 * TIB, 3 * TIB),
    )
    assert [c["channel"] for c in result] == [
        "Hardware ok count",
        "Hardware not installed count",
        "Hardware NOT ok count",
        "Volumes (Bytes)",
        "Total used space (Bytes)",
        "Total sorage capacity (Bytes)",
        "Free space (Bytes)",
        "Free space (%)",
        "IOPS - Writes/sec",
        "IOPS - Reads/sec",
        "Write latency (ms)",
        "Read latency (ms)",
    ]


def test_build_channels_values():
    result = _by_name(build_channels(
        _hardware("ok", "ok", "not_installed", "failed"),
        PerformanceSnapshot(writes_per_sec=1200, reads_per_sec=3400,
                            usec_per_write_op=2500, usec_per_read_op=2500),
        _space(10 * TIB, 4 * TIB, 3 * TIB),
    ))

    assert result[channels.HARDWARE_OK]["value"] == 2
    assert result[channels.HARDWARE_NOT_INSTALLED]["value"] == 1
    assert result[channels.HARDWARE_NOT_OK]["value"] == 1
    assert result[channels.VOLUMES]["value"] == 3.0
    assert result[channels.TOTAL_USED]["value"] == 4.0
    assert result[channels.TOTAL_CAPACITY]["value"] == 10.0
    assert result[channels.FREE_SPACE]["value"] == 6.0
    assert result[channels.FREE_SPACE_PERCENT]["value"] == 60.0
    assert result[channels.WRITE_IOPS]["value"] == 1200
    assert result[channels.READ_IOPS]["value"] == 3400
    assert result[channels.WRITE_LATENCY]["value"] == 2.5
    assert result[channels.READ_LATENCY]["value"] == 2.5


def test_channel_settings_are_exact():
    result = _by_name(build_channels(_hardware(), _idle_performance(), _space(TIB, 0)))

    assert result[channels.HARDWARE_OK] == {"channel": "Hardware ok count", "value": 0, "unit": "Count"}
    not_ok = result[channels.HARDWARE_NOT_OK]
    assert not_ok["limitmode"] == 1
    assert not_ok["limitmaxerror"] == 1
    assert not_ok["limiterrormsg"]

    tb = result[channels.TOTAL_CAPACITY]
    assert tb["unit"] == "Custom"
    assert tb["customunit"] == "TB"
    assert tb["float"] == 1
    assert tb["DecimalMode"] == "3"

    percent = result[channels.FREE_SPACE_PERCENT]
    assert percent["unit"] == "Percent"
    assert percent["limitminerror"] == 10
    assert percent["limitminwarning"] == 20
    assert percent["limiterrormsg"] and percent["limitwarningmsg"]

    assert result[channels.READ_IOPS]["customunit"] == "IO/s"
    latency = result[channels.READ_LATENCY]
    assert latency["customunit"] == "ms"
    assert latency["decimalmode"] == 3


def test_channel_settings_are_not_shared_between_results():
    first = build_channels(_hardware(), _idle_performance(), _space(TIB, 0))
    first[3]["customunit"] = "changed"
    second = build_channels(_hardware(), _idle_performance(), _space(TIB, 0))
    assert second[3]["customunit"] == "TB"
