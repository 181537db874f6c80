"""
Base writer interface for the PureFA PRTG sensor.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

# Initialize logger
LOG = logging.getLogger(__name__)

class Writer(ABC):
    """
    Base class for all writers.
    """

    @abstractmethod
    def write_result(self, channels: List[Dict[str, Any]]) -> None:
        """
        Write a successful sensor result.

        Args:
            channels: Ordered list of PRTG channel dicts
        """
        pass

    @abstractmethod
    def write_error(self, message: str) -> None:
        """
        Write a sensor error.

        Args:
            message: Human-readable diagnostic shown by the monitoring system
        """
        pass
