# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
PRTG custom sensor for Pure Storage FlashArray.

The package follows a small pipeline:
- config: Merge CLI, environment and YAML settings into a SensorConfig
- connection: Authenticate against the FlashArray REST 2.x API
- collectors: Read hardware, performance and space data
- aggregator: Turn the collected records into PRTG channels
- writer: Print the PRTG JSON document
"""

__version__ = "1.0.0"
