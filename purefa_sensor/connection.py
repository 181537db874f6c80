# -----------------------------------------------------------------------------
# Copyright (c) 2025 PureFA PRTG Sensor contributors
# Licensed under the MIT License. See LICENSE in project root for details.
# -----------------------------------------------------------------------------

import logging
import ssl
from typing import Mapping, Optional, Tuple

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3 import PoolManager
from urllib3.util.ssl_ import create_urllib3_context

from purefa_sensor import __version__
from purefa_sensor.config import SensorConfig
from purefa_sensor.errors import ArrayConnectionError

LOG = logging.getLogger(__name__)

USER_AGENT = f"purefa-prtg-sensor/{__version__}"
REST_MAJOR_VERSION = 2


class SSLAdapter(HTTPAdapter):
    """An HTTPS Transport Adapter that uses an explicit SSL context."""
    def __init__(self, verify_flags=ssl.VERIFY_X509_STRICT, **kwargs):
        self.verify_flags = verify_flags
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        context = create_urllib3_context()
        context.verify_flags |= self.verify_flags
        self.poolmanager = PoolManager(num_pools=connections, maxsize=maxsize,
                                       block=block, ssl_context=context, **pool_kwargs)


def parse_rest_version(raw_version: str) -> Tuple[int, int]:
    major, minor = raw_version.split('.', 1)
    return int(major), int(minor)


def base_url_for(address: str) -> str:
    """Accept a bare host name / IP or a full URL and return the HTTPS base URL."""
    address = address.strip().rstrip('/')
    if address.startswith('http://'):
        # Tokens never go over plain HTTP
        address = address[len('http://'):]
    if not address.startswith('https://'):
        address = f'https://{address}'
    return address


class FlashArraySession:
    """
    Authenticated handle to one FlashArray REST 2.x endpoint.

    The verify keyword is passed on every request, otherwise it would be
    overridden by the REQUESTS_CA_BUNDLE environment variable.
    """

    def __init__(self, address: str, tls_validation: str = 'strict',
                 tls_ca: Optional[str] = None, timeout: float = 30.0):
        self.address = address
        self.base_url = base_url_for(address)
        self.timeout = timeout
        self.rest_version: Optional[str] = None
        self._auth_token: Optional[str] = None

        self._session = requests.Session()
        self._session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        })

        if tls_validation == 'none':
            self._verify = False
            urllib3.disable_warnings(category=urllib3.exceptions.InsecureRequestWarning)
            LOG.warning("TLS validation is DISABLED (verify=False). The array certificate will not be checked.")
        else:
            verify_flags = ssl.VERIFY_X509_STRICT if tls_validation == 'strict' else ssl.VERIFY_DEFAULT
            self._session.mount("https://", SSLAdapter(verify_flags=verify_flags))
            self._verify = tls_ca if tls_ca else True

    @property
    def authenticated(self) -> bool:
        return self._auth_token is not None

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.lstrip('/')}"

    def _auth_headers(self) -> Mapping[str, str]:
        return {"x-auth-token": self._auth_token} if self._auth_token else {}

    def get(self, path: str, params: Optional[Mapping[str, str]] = None) -> requests.Response:
        """GET ``/api/<rest_version>/<path>`` with the session token."""
        url = self._url(f"{self.rest_version}/{path}")
        LOG.debug(f"GET {url} params={params}")
        return self._session.get(
            url,
            headers=self._auth_headers(),
            params=params,
            verify=self._verify,
            timeout=self.timeout,
        )

    def read_latest_api_version(self) -> str:
        """Return the newest 2.x REST version the array offers, e.g. ``"2.26"``."""
        try:
            resp = self._session.get(self._url("api_version"), verify=self._verify, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ArrayConnectionError(f"Connection to {self.address} failed: {e}") from e

        if resp.status_code != 200:
            raise ArrayConnectionError(
                f"Getting API version from {self.address} failed: {resp.reason} ({resp.status_code})"
            )

        try:
            versions = [parse_rest_version(v) for v in resp.json()["version"]]
        except (ValueError, KeyError, TypeError) as e:
            raise ArrayConnectionError(f"Unexpected API version response from {self.address}: {e}") from e

        candidates = [v for v in versions if v[0] == REST_MAJOR_VERSION]
        if not candidates:
            raise ArrayConnectionError(
                f"Array {self.address} does not offer REST API version {REST_MAJOR_VERSION}.x"
            )
        latest = max(candidates)
        return f"{latest[0]}.{latest[1]}"

    def login(self, api_token: str) -> None:
        """Exchange the API token for a session token (``x-auth-token``)."""
        url = self._url(f"{self.rest_version}/login")
        LOG.info(f"Logging in to {url}")
        try:
            resp = self._session.post(
                url,
                headers={"api-token": api_token},
                verify=self._verify,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise ArrayConnectionError(f"Connection to {self.address} failed: {e}") from e

        if resp.status_code != 200:
            raise ArrayConnectionError(
                f"Login to {self.address} failed: {resp.reason} ({resp.status_code})"
            )

        token = resp.headers.get("x-auth-token")
        if not token:
            raise ArrayConnectionError(f"Login to {self.address} failed: no x-auth-token in response")
        self._auth_token = token
        LOG.info(f"Successfully authenticated to {self.address} (REST {self.rest_version})")

    def logout(self) -> None:
        """End the REST session. Failures are only logged."""
        if not self._auth_token:
            return
        try:
            resp = self._session.post(
                self._url(f"{self.rest_version}/logout"),
                headers=self._auth_headers(),
                verify=self._verify,
                timeout=self.timeout,
            )
            if resp.status_code != 200:
                LOG.warning(f"Logout from {self.address} returned HTTP {resp.status_code}")
        except requests.exceptions.RequestException as e:
            LOG.warning(f"Logout from {self.address} failed: {e}")
        finally:
            self._auth_token = None
            self._session.close()


def get_session(config: SensorConfig) -> FlashArraySession:
    """
    Return an authenticated FlashArraySession for the configured array.

    Args:
        config: SensorConfig with address and api_token set

    Returns:
        Logged-in session with ``rest_version`` resolved

    Raises:
        ArrayConnectionError: array unreachable, TLS failure or login rejected
    """
    session = FlashArraySession(
        config.address,
        tls_validation=config.tls_validation,
        tls_ca=config.tls_ca,
        timeout=config.timeout,
    )
    session.rest_version = config.rest_version or session.read_latest_api_version()
    LOG.info(f"Using REST API version {session.rest_version} on {session.base_url}")
    session.login(config.api_token)
    return session
