# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
Sensor pipeline: validate, connect, collect, aggregate, emit.

Every step yields an Ok or Err result. The first Err stops the run and is
written as the PRTG error payload; there is no partial result.
"""

import concurrent.futures
import logging
import time
from typing import Any, Callable, Optional

from purefa_sensor.aggregator import build_channels
from purefa_sensor.collectors import HardwareCollector, PerformanceCollector, SpaceCollector
from purefa_sensor.config import SensorConfig
from purefa_sensor.connection import get_session
from purefa_sensor.result import Ok, Result, capture
from purefa_sensor.writer.base import Writer
from purefa_sensor.writer.prtg_writer import PrtgWriter

LOG = logging.getLogger(__name__)

# Collection order; also the order in which errors are reported
COLLECTORS = (HardwareCollector, PerformanceCollector, SpaceCollector)


def collect_sequential(session) -> Result:
    """Run the collectors one after another, stopping at the first failure."""
    collected = []
    for collector_cls in COLLECTORS:
        result = capture(collector_cls(session).collect)
        if not result.is_ok:
            return result
        collected.append(result.value)
    return Ok(tuple(collected))


def collect_parallel(session) -> Result:
    """
    Run the collectors concurrently.

    All requests are issued; the outcome is all-or-nothing and, if several
    collectors fail, the error of the first one in COLLECTORS order wins.
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=len(COLLECTORS)) as executor:
        futures = [executor.submit(capture, collector_cls(session).collect)
                   for collector_cls in COLLECTORS]
        results = [future.result() for future in futures]

    collected = []
    for result in results:
        if not result.is_ok:
            return result
        collected.append(result.value)
    return Ok(tuple(collected))


def collect_channels(config: SensorConfig,
                     session_factory: Optional[Callable[[SensorConfig], Any]] = None) -> Result:
    """
    Produce the PRTG channel list for one array.

    Args:
        config: Sensor configuration
        session_factory: Returns an authenticated session for ``config``,
            get_session() when None

    Returns:
        Ok(list of channel dicts) or Err(message)
    """
    validated = capture(config.validate_required)
    if not validated.is_ok:
        LOG.error(validated.message)
        return validated

    connected = capture(session_factory or get_session, config)
    if not connected.is_ok:
        LOG.error(connected.message)
        return connected

    session = connected.value
    try:
        collect = collect_parallel if config.parallel else collect_sequential
        result = collect(session).and_then(lambda data: capture(build_channels, *data))
    finally:
        logout = capture(session.logout)
        if not logout.is_ok:
            LOG.warning(f"Logout failed: {logout.message}")

    if not result.is_ok:
        LOG.error(result.message)
    return result


def run_sensor(config: SensorConfig, writer: Optional[Writer] = None,
               session_factory: Optional[Callable[[SensorConfig], Any]] = None) -> Result:
    """
    Run the sensor once and write exactly one PRTG document.

    Args:
        config: Sensor configuration
        writer: Destination for the document, PrtgWriter on stdout by default
        session_factory: Returns an authenticated session for ``config``,
            get_session() when None

    Returns:
        The final Ok/Err result, for callers that want to inspect it
    """
    writer = writer or PrtgWriter()
    time_begin = time.time()

    result = capture(collect_channels, config, session_factory).and_then(lambda r: r)

    if result.is_ok:
        writer.write_result(result.value)
    else:
        writer.write_error(result.message)

    LOG.debug(f"Sensor run finished in {time.time() - time_begin:.2f}s (ok={result.is_ok})")
    return result
