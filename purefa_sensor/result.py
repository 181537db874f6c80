# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
Ok / Err result union used between pipeline steps.

Each step of the sensor returns either ``Ok(value)`` or ``Err(message)``.
The first ``Err`` short-circuits the pipeline and becomes the PRTG error
payload, so a run always ends with exactly one JSON document.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from purefa_sensor.errors import SensorError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def and_then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        return func(self.value)


@dataclass(frozen=True)
class Err:
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def and_then(self, func: Callable[[Any], "Result[U]"]) -> "Result[U]":
        return self

    @classmethod
    def from_exception(cls, exc: Exception) -> "Err":
        if isinstance(exc, SensorError):
            return cls(exc.message)
        return cls(f"Unexpected error: {exc}")


Result = Union[Ok[T], Err]


def capture(func: Callable[..., T], *args, **kwargs) -> "Result[T]":
    """
    Run ``func`` and wrap its outcome.

    Args:
        func: Callable that either returns a value or raises
        *args: Positional arguments for ``func``
        **kwargs: Keyword arguments for ``func``

    Returns:
        Ok with the return value, or Err built from the raised exception
    """
    try:
        return Ok(func(*args, **kwargs))
    except Exception as e:
        return Err.from_exception(e)
