# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
PRTG channel definitions for the PureFA sensor.

PRTG matches channels by exact name, so names and key casing here must not
change between releases (including "sorage" and the mixed-case
DecimalMode/decimalmode keys).
"""

HARDWARE_OK = "Hardware ok count"
HARDWARE_NOT_INSTALLED = "Hardware not installed count"
HARDWARE_NOT_OK = "Hardware NOT ok count"
VOLUMES = "Volumes (Bytes)"
TOTAL_USED = "Total used space (Bytes)"
TOTAL_CAPACITY = "Total sorage capacity (Bytes)"
FREE_SPACE = "Free space (Bytes)"
FREE_SPACE_PERCENT = "Free space (%)"
WRITE_IOPS = "IOPS - Writes/sec"
READ_IOPS = "IOPS - Reads/sec"
WRITE_LATENCY = "Write latency (ms)"
READ_LATENCY = "Read latency (ms)"

# Emission order of the result list
CHANNEL_ORDER = [
    HARDWARE_OK,
    HARDWARE_NOT_INSTALLED,
    HARDWARE_NOT_OK,
    VOLUMES,
    TOTAL_USED,
    TOTAL_CAPACITY,
    FREE_SPACE,
    FREE_SPACE_PERCENT,
    WRITE_IOPS,
    READ_IOPS,
    WRITE_LATENCY,
    READ_LATENCY,
]

# Free space thresholds in percent
FREE_SPACE_MIN_ERROR = 10
FREE_SPACE_MIN_WARNING = 20

COUNT_UNIT = {"unit": "Count"}

HARDWARE_NOT_OK_LIMITS = {
    "limitmode": 1,
    "limitmaxerror": 1,
    "limiterrormsg": "One or more hardware components are not ok",
}

TERABYTE_UNIT = {
    "unit": "Custom",
    "customunit": "TB",
    "float": 1,
    "DecimalMode": "3",
}

PERCENT_UNIT = {
    "unit": "Percent",
    "float": 1,
}

FREE_SPACE_PERCENT_LIMITS = {
    "limitmode": 1,
    "limitminerror": FREE_SPACE_MIN_ERROR,
    "limiterrormsg": f"Free space is below {FREE_SPACE_MIN_ERROR}%",
    "limitminwarning": FREE_SPACE_MIN_WARNING,
    "limitwarningmsg": f"Free space is below {FREE_SPACE_MIN_WARNING}%",
}

IOPS_UNIT = {
    "unit": "Custom",
    "customunit": "IO/s",
}

LATENCY_UNIT = {
    "unit": "Custom",
    "customunit": "ms",
    "float": 1,
    "decimalmode": 3,
}

CHANNEL_SETTINGS = {
    HARDWARE_OK: COUNT_UNIT,
    HARDWARE_NOT_INSTALLED: COUNT_UNIT,
    HARDWARE_NOT_OK: {**COUNT_UNIT, **HARDWARE_NOT_OK_LIMITS},
    VOLUMES: TERABYTE_UNIT,
    TOTAL_USED: TERABYTE_UNIT,
    TOTAL_CAPACITY: TERABYTE_UNIT,
    FREE_SPACE: TERABYTE_UNIT,
    FREE_SPACE_PERCENT: {**PERCENT_UNIT, **FREE_SPACE_PERCENT_LIMITS},
    WRITE_IOPS: IOPS_UNIT,
    READ_IOPS: IOPS_UNIT,
    WRITE_LATENCY: LATENCY_UNIT,
    READ_LATENCY: LATENCY_UNIT,
}


def make_channel(name, value):
    """
    Build one PRTG result entry.

    Args:
        name: Channel name, must be one of CHANNEL_ORDER
        value: Channel value

    Returns:
        dict with channel, value and the channel's unit/limit settings
    """
    channel = {"channel": name, "value": value}
    channel.update(CHANNEL_SETTINGS[name])
    return channel
