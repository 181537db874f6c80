#!/usr/bin/env python3

# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

"""
CLI for the PureFA PRTG sensor

Reads hardware, space and performance figures from one FlashArray and prints
them as a PRTG "EXE/Script Advanced" JSON document.
"""

import argparse
import logging
import sys

from purefa_sensor import __version__
from purefa_sensor.config import load_settings
from purefa_sensor.errors import InvalidArgumentsError
from purefa_sensor.sensor import run_sensor
from purefa_sensor.writer.prtg_writer import PrtgWriter

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SensorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting with 2."""

    def error(self, message):
        raise InvalidArgumentsError(f"Invalid arguments: {message}")


def build_parser():
    parser = SensorArgumentParser(
        description='PRTG sensor for Pure Storage FlashArray',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Typical PRTG parameters field
  purefa-prtg-sensor --api-token %apitoken --address %host

  # Array with a self-signed certificate
  purefa-prtg-sensor --api-token 0a1b2c3d-... --address 10.0.0.50 --tls-validation none

  # Settings from a YAML file, token from the environment (PUREFA_API_TOKEN)
  purefa-prtg-sensor --config /etc/purefa-sensor.yaml --verbose --log-file sensor.log
        """
    )

    parser.add_argument('--api-token', dest='api_token',
                        help='FlashArray API token (env: PUREFA_API_TOKEN)')
    parser.add_argument('--address', '--endpoint', dest='address',
                        help='Array management host name or IP address (env: PUREFA_ADDRESS)')
    parser.add_argument('--config', '-c',
                        help='YAML file with sensor settings')
    parser.add_argument('--tls-validation', dest='tls_validation',
                        choices=['strict', 'normal', 'none'],
                        help='TLS certificate validation mode (default: strict)')
    parser.add_argument('--tls-ca', dest='tls_ca',
                        help='CA bundle used to validate the array certificate')
    parser.add_argument('--timeout', type=float,
                        help='Request timeout in seconds (default: 30)')
    parser.add_argument('--rest-version', dest='rest_version',
                        help='Pin the REST API version, e.g. 2.21 (default: newest 2.x)')
    parser.add_argument('--parallel', action='store_true', default=None,
                        help='Query the three metric categories concurrently')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--log-file', dest='log_file',
                        help='Write log messages to this file instead of stderr')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def parse_arguments(argv=None):
    return build_parser().parse_args(argv)


def setup_logging(verbose=False, log_file=None):
    # stdout belongs to PRTG; logs go to stderr or a file
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        filename=log_file,
    )


def main(argv=None, stream=None):
    """
    Run the sensor once. Always returns 0: PRTG reads success or failure
    from the JSON document, not from the exit code.
    """
    if stream is None and hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')
    writer = PrtgWriter(stream)

    try:
        args = parse_arguments(argv)
    except InvalidArgumentsError as e:
        setup_logging()
        logging.getLogger("purefa_sensor_cli").error(e.message)
        writer.write_error(e.message)
        return 0

    try:
        setup_logging(args.verbose, args.log_file)
    except OSError as e:
        setup_logging(args.verbose)
        message = f"Cannot open log file {args.log_file}: {e}"
        logging.getLogger("purefa_sensor_cli").error(message)
        writer.write_error(message)
        return 0
    LOG = logging.getLogger("purefa_sensor_cli")

    try:
        config = load_settings(args)
    except InvalidArgumentsError as e:
        LOG.error(e.message)
        writer.write_error(e.message)
        return 0

    LOG.info(f"Polling {config.address} (tls_validation={config.tls_validation}, parallel={config.parallel})")
    run_sensor(config, writer)
    return 0


if __name__ == '__main__':
    sys.exit(main())
