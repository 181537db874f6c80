"""
PRTG "EXE/Script Advanced" JSON writer.
"""

import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from purefa_sensor.writer.base import Writer

# Initialize logger
LOG = logging.getLogger(__name__)


def result_payload(channels: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"prtg": {"result": channels}}


def error_payload(message: str) -> Dict[str, Any]:
    return {"prtg": {"error": 1, "message": message}}


class PrtgWriter(Writer):
    """
    Writer that prints one PRTG JSON document to a text stream.

    PRTG reads the script's standard output, so nothing else may be written
    to the stream.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: Output stream, standard output when None
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so that a replaced sys.stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, payload: Dict[str, Any]) -> None:
        # allow_nan=False: NaN/Infinity would make the document unparseable
        try:
            document = json.dumps(payload, ensure_ascii=False, allow_nan=False)
        except ValueError as e:
            LOG.error(f"Result is not JSON serializable: {e}")
            document = json.dumps(error_payload(f"Sensor produced an invalid value: {e}"))
        self.stream.write(document + "\n")
        self.stream.flush()

    def write_result(self, channels: List[Dict[str, Any]]) -> None:
        LOG.info(f"Writing {len(channels)} channels")
        self._emit(result_payload(channels))

    def write_error(self, message: str) -> None:
        LOG.info(f"Writing error: {message}")
        self._emit(error_payload(message))
