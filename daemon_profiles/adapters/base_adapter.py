"""
Base daemon adapter - Abstract base class for daemon adapters.
Holds the resolved connection settings and the HTTP session built from them.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3 import disable_warnings
from urllib3.exceptions import InsecureRequestWarning

from ..models import Daemon, DaemonSettings

disable_warnings(InsecureRequestWarning)
logger = logging.getLogger(__name__)


class FingerprintAdapter(HTTPAdapter):
    """Transport adapter that only accepts a certificate with the given fingerprint"""

    def __init__(self, fingerprint: str, **kwargs):
        self.fingerprint = fingerprint
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["assert_fingerprint"] = self.fingerprint
        return super().init_poolmanager(*args, **kwargs)


class DaemonAdapter(ABC):
    """
    Abstract base class for daemon adapters.

    Design Pattern: Strategy Pattern
    Each daemon type registers a subclass with the AdapterFactory.

    Responsibilities:
    - Keep the DaemonSettings the adapter was created for
    - Manage an HTTP session honouring the TLS and authentication settings
    """

    def __init__(self, settings: DaemonSettings):
        """
        Initialize adapter with resolved settings.

        Args:
            settings: Connection parameters for the daemon
        """
        self.settings = settings
        self.base_url = settings.get_base_url()
        self._session: Optional[requests.Session] = None

    @property
    @abstractmethod
    def daemon_type(self) -> Daemon:
        """Return the daemon type this adapter talks to"""
        pass

    @property
    def timeout(self) -> Optional[float]:
        """Request timeout in seconds, None when the settings carry 0 (wait indefinitely)"""
        milliseconds = self.settings.get_timeout_in_milliseconds()
        if milliseconds <= 0:
            return None
        return milliseconds / 1000

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        if self.settings.ssl_trust_key:
            # Pinned certificate; chain validation is replaced by the fingerprint check
            session.verify = False
            session.mount("https://", FingerprintAdapter(self.settings.ssl_trust_key))
        elif self.settings.ssl_trust_all:
            session.verify = False

        if self.settings.use_authentication and self.settings.username:
            session.auth = (self.settings.username, self.settings.password or "")

        return session

    def ensure_connected(self) -> requests.Session:
        """Open the HTTP session if it is not open yet"""
        if self._session is None:
            logger.info(f"Connecting to {self.daemon_type} at {self.base_url}...")
            self._session = self._create_session()
        return self._session

    def request(self, method: str, path: str = "", **kwargs) -> requests.Response:
        """
        Send a request relative to the daemon base URL.

        Args:
            method: HTTP method
            path: Path appended to the base URL

        Returns:
            Response object

        Raises:
            requests.HTTPError: If the daemon answers with an error status
        """
        session = self.ensure_connected()
        kwargs.setdefault("timeout", self.timeout)
        response = session.request(method, f"{self.base_url}{path}", **kwargs)
        response.raise_for_status()
        return response

    def disconnect(self) -> None:
        """Close the HTTP session"""
        if self._session is not None:
            try:
                self._session.close()
                logger.info(f"Disconnected from {self.daemon_type} at {self.base_url}")
            finally:
                self._session = None

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.disconnect()
