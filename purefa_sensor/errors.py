# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
Exceptions raised by the sensor pipeline.

Every one of them ends up as a PRTG error payload; none escapes the process.
"""


class SensorError(Exception):
    """Base error. The message is what PRTG shows to the operator."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(SensorError):
    """A required parameter (API token or array address) is empty."""

    def __init__(self, parameter: str):
        super().__init__(f"Missing required parameter: {parameter}")
        self.parameter = parameter


class InvalidArgumentsError(SensorError):
    pass


class ArrayConnectionError(SensorError):
    """Login or API version discovery failed."""
    pass


class CollectionError(SensorError):
    """One of the metric categories could not be read or interpreted."""

    def __init__(self, category: str, detail: str):
        super().__init__(f"Failed to collect {category} metrics: {detail}")
        self.category = category
        self.detail = detail
