"""
Server profile data model - Value Object pattern.
Immutable user-configured connection profile for a remote download daemon.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple
from urllib.parse import urlsplit

from .daemon_type import Daemon, OS
from .daemon_settings import DaemonSettings

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Default"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _host_of(address: str) -> Optional[str]:
    """Host part of a URI as written (case and IPv6 brackets kept), None if there is none"""
    try:
        netloc = urlsplit(address).netloc
    except ValueError:
        return None
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[:host.find("]") + 1]
    else:
        host = host.partition(":")[0]
    return host or None


@dataclass(frozen=True, eq=False)
class ServerProfile:
    """
    Immutable server profile.

    A profile carries two endpoints: the remote ``address``/``port`` and an
    optional ``local_address``/``local_port`` pair that is only used while
    the caller is attached to ``local_network``. Everything else (TLS,
    credentials, folder) is shared by both endpoints.

    Equality is based on ``key`` alone, so a profile compares equal to an
    edited copy of itself. It also compares equal to a DaemonSettings whose
    ``id_string`` is the decimal form of ``key``.

    Attributes:
        key: Ordinal identity of the profile in the settings store
        name: User label; blank means "derive one from the address"
        type: Daemon type, None while the profile is being configured
        address: Remote host name, IP or URL
        port: Remote port
        local_address: Host to use inside the local network
        local_port: Port to use inside the local network
        local_network: Network name (SSID) that activates the local endpoint
        timeout: Connection timeout in seconds
        is_auto_generated: Created by the application rather than the user
    """
    key: int
    name: Optional[str] = None
    type: Optional[Daemon] = None
    address: str = ""
    port: int = 0
    local_address: Optional[str] = None
    local_port: int = 0
    local_network: Optional[str] = None
    ssl: bool = False
    ssl_trust_all: bool = False
    ssl_trust_key: Optional[str] = None
    folder: Optional[str] = None
    use_authentication: bool = False
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    extra_password: Optional[str] = field(default=None, repr=False)
    os: OS = OS.LINUX
    download_dir: Optional[str] = None
    ftp_url: Optional[str] = None
    ftp_password: Optional[str] = field(default=None, repr=False)
    timeout: int = 8
    alarm_on_finished_download: bool = True
    alarm_on_new_torrent: bool = True
    is_auto_generated: bool = False

    @property
    def order(self) -> int:
        """Storage order of the profile (same as key)"""
        return self.key

    def get_name(self) -> str:
        """
        Get the label to show for this server.

        Falls back to the host part of the address and then to
        DEFAULT_NAME. Never raises, whatever the address holds.
        """
        if not _is_blank(self.name):
            return self.name
        if self.address:
            return _host_of(self.address) or DEFAULT_NAME
        return DEFAULT_NAME

    def get_timeout_in_milliseconds(self) -> int:
        return self.timeout * 1000

    def _credentials_prefix(self) -> str:
        if self.use_authentication and not _is_blank(self.username):
            return f"{self.username}@"
        return ""

    def get_human_readable_identifier(self) -> str:
        """
        Get a string the user can recognise the server by, independent of its name.

        Returns:
            [username@]address for auto-generated profiles, otherwise
            http(s)://[username@]address:port[folder]
        """
        if self.is_auto_generated:
            # Hide scheme, port and folder
            return f"{self._credentials_prefix()}{self.address}"

        scheme = "https" if self.ssl else "http"
        identifier = f"{scheme}://{self._credentials_prefix()}{self.address}:{self.port}"
        if self.type is not None and self.type.supports_custom_folder and self.folder is not None:
            identifier += self.folder
        return identifier

    def get_unique_identifier(self) -> Optional[str]:
        """
        Get an identifier that does not depend on the storage order.

        It changes when address, port, SSL or user name are edited, but not
        with the name or notification settings. Use ``key`` to correlate
        across edits.

        Returns:
            "<daemon>|<human readable identifier>", or None while the profile
            is not yet identifiable (no type or no address)
        """
        if self.type is None or not self.address:
            return None
        return f"{self.type}|{self.get_human_readable_identifier()}"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ServerProfile):
            return other.key == self.key
        if isinstance(other, DaemonSettings):
            # Settings built from a profile carry its key as id string
            return other.id_string == str(self.key)
        return False

    def __hash__(self) -> int:
        return hash(self.key)

    def is_on_local_network(self, current_network: Optional[str]) -> bool:
        """Check whether the local endpoint applies for the observed network"""
        return (
            self.local_network is not None
            and current_network is not None
            and current_network == self.local_network
        )

    def resolve_address(self, current_network: Optional[str]) -> Tuple[str, int]:
        """
        Pick the endpoint for the network the caller is attached to.

        Args:
            current_network: Name of the connected (wifi) network, or None
                if it could not be determined

        Returns:
            Tuple of (address, port)
        """
        if self.is_on_local_network(current_network):
            return self.local_address, self.local_port
        return self.address, self.port

    def resolve_connection_parameters(self, current_network: Optional[str]) -> DaemonSettings:
        """
        Convert this profile into DaemonSettings for the observed network.

        Args:
            current_network: Name of the connected (wifi) network, or None

        Returns:
            DaemonSettings with the resolved address and port and the key
            as id string
        """
        if self.local_network is not None:
            type_name = self.type.name if self.type is not None else None
            logger.debug(
                f"Creating adapter for {self.name} of type {type_name}: connected to "
                f"{current_network} and configured local network is {self.local_network}"
            )

        address, port = self.resolve_address(current_network)
        return DaemonSettings(
            name=self.name,
            type=self.type,
            address=address,
            port=port,
            ssl=self.ssl,
            ssl_trust_all=self.ssl_trust_all,
            ssl_trust_key=self.ssl_trust_key,
            folder=self.folder,
            use_authentication=self.use_authentication,
            username=self.username,
            password=self.password,
            extra_password=self.extra_password,
            os=self.os,
            download_dir=self.download_dir,
            ftp_url=self.ftp_url,
            ftp_password=self.ftp_password,
            timeout=self.timeout,
            alarm_on_finished_download=self.alarm_on_finished_download,
            alarm_on_new_torrent=self.alarm_on_new_torrent,
            id_string=str(self.key),
            is_auto_generated=self.is_auto_generated,
        )

    def create_adapter(self, current_network: Optional[str], adapter_factory):
        """
        Create the daemon adapter to execute tasks against.

        Errors raised by the factory are not caught.

        Args:
            current_network: Name of the connected (wifi) network, or None
            adapter_factory: Object exposing create_adapter(daemon_type, settings)

        Returns:
            Whatever the factory returns for this profile's daemon type
        """
        settings = self.resolve_connection_parameters(current_network)
        return adapter_factory.create_adapter(self.type, settings)
