"""
Daemon and OS enumerations.
Closed set of supported download daemons and remote filesystem conventions.
"""

from enum import Enum
from typing import FrozenSet


class Daemon(Enum):
    """Daemon type enumeration"""
    ARIA2 = "Aria2"
    BIGLYBT = "BiglyBT"
    BITCOMET = "BitComet"
    BITFLU = "Bitflu"
    BITTORRENT = "BitTorrent"
    BUFFALO_NAS = "BuffaloNas"
    DELUGE = "Deluge"
    DELUGE_RPC = "DelugeRpc"
    DLINK_ROUTER_BT = "DLinkRouterBT"
    KTORRENT = "Ktorrent"
    QBITTORRENT = "qBittorrent"
    RTORRENT = "rTorrent"
    SYNOLOGY = "Synology"
    TFB4RT = "Tfb4rt"
    TOMATO = "Tomato"
    TRANSMISSION = "Transmission"
    UTORRENT = "uTorrent"
    VUZE = "Vuze"

    def __str__(self) -> str:
        return self.value

    @property
    def supports_custom_folder(self) -> bool:
        """Whether the daemon is reachable under a configurable sub-path (web root or SCGI mount)"""
        return self in _CUSTOM_FOLDER_DAEMONS


_CUSTOM_FOLDER_DAEMONS: FrozenSet[Daemon] = frozenset({
    Daemon.ARIA2,
    Daemon.BITCOMET,
    Daemon.BITFLU,
    Daemon.DELUGE,
    Daemon.DELUGE_RPC,
    Daemon.QBITTORRENT,
    Daemon.RTORRENT,
    Daemon.TFB4RT,
    Daemon.TRANSMISSION,
})


class OS(Enum):
    """Filesystem convention of the machine the daemon runs on"""
    WINDOWS = "Windows"
    MAC = "Mac"
    LINUX = "Linux"

    def __str__(self) -> str:
        return self.value
