"""
Daemon settings data model - Value Object pattern.
Connection parameters handed to daemon adapters, addressed by a string id.
"""

from dataclasses import dataclass, field
from typing import Optional

from .daemon_type import Daemon, OS


@dataclass(frozen=True)
class DaemonSettings:
    """
    Immutable, fully resolved connection parameters for one daemon.

    This is the older, string-id-addressed representation of a configured
    server. A ServerProfile produces one of these for the network it is
    currently resolved against; ``id_string`` carries the profile key.

    Attributes:
        name: User label of the server (may be None)
        type: Daemon type
        address: Host name or IP to connect to
        port: Port to connect to
        timeout: Connection timeout in seconds
        id_string: Legacy identifier (decimal form of the profile key)
    """
    name: Optional[str]
    type: Daemon
    address: str
    port: int
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
    id_string: str = ""
    is_auto_generated: bool = False

    def get_timeout_in_milliseconds(self) -> int:
        return self.timeout * 1000

    def get_scheme(self) -> str:
        return "https" if self.ssl else "http"

    def get_base_url(self) -> str:
        """
        Build the URL adapters connect to.

        Returns:
            URL in the form scheme://address:port[/folder]
        """
        url = f"{self.get_scheme()}://{self.address}:{self.port}"
        if self.type is not None and self.type.supports_custom_folder and self.folder:
            url += self.folder if self.folder.startswith("/") else f"/{self.folder}"
        return url
