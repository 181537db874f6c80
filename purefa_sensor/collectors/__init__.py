"""
Collectors package for the PureFA PRTG sensor.

Available collectors:
- collector.py: Base REST collector (FlashArrayCollector)
- hardware_collector.py: Per-component hardware status
- performance_collector.py: Array-wide IOPS and latency
- space_collector.py: Array-wide capacity and usage
"""

from purefa_sensor.collectors.hardware_collector import HardwareCollector
from purefa_sensor.collectors.performance_collector import PerformanceCollector
from purefa_sensor.collectors.space_collector import SpaceCollector

__all__ = ['HardwareCollector', 'PerformanceCollector', 'SpaceCollector']
