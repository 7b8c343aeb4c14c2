"""Test fixtures for daemon_profiles tests."""

import logging

import pytest

from daemon_profiles import AdapterFactory, Daemon, DaemonAdapter, DaemonSettings, ServerProfile


class RecordingAdapter(DaemonAdapter):
    """Minimal adapter that only exposes the settings it was created with."""

    @property
    def daemon_type(self) -> Daemon:
        return self.settings.type


@pytest.fixture
def home_profile() -> ServerProfile:
    """Profile with both a remote endpoint and a HomeWifi override."""
    return ServerProfile(
        key=7,
        name="Seedbox",
        type=Daemon.TRANSMISSION,
        address="seedbox.example.com",
        port=9091,
        local_address="192.168.1.10",
        local_port=9092,
        local_network="HomeWifi",
        ssl=True,
        ssl_trust_all=True,
        ssl_trust_key="AB:CD",
        folder="/transmission",
        use_authentication=True,
        username="bob",
        password="secret",
        extra_password="extra",
        download_dir="/downloads",
        ftp_url="ftp://seedbox.example.com/",
        ftp_password="ftpsecret",
        timeout=30,
        alarm_on_finished_download=False,
        alarm_on_new_torrent=True,
    )


@pytest.fixture
def factory() -> AdapterFactory:
    """Factory with a recording adapter registered for Transmission."""
    return AdapterFactory({Daemon.TRANSMISSION: RecordingAdapter})


@pytest.fixture
def settings() -> DaemonSettings:
    """Resolved settings for an authenticated HTTPS daemon."""
    return DaemonSettings(
        name="Seedbox",
        type=Daemon.TRANSMISSION,
        address="seedbox.example.com",
        port=9091,
        ssl=True,
        folder="/transmission",
        use_authentication=True,
        username="bob",
        password="secret",
        timeout=30,
        id_string="7",
    )


@pytest.fixture
def adapter_class() -> type:
    """Adapter class used for registry and session tests."""
    return RecordingAdapter


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo logger levels changed by setup_logging()."""
    loggers = [logging.getLogger(name) for name in ("daemon_profiles", "urllib3")]
    levels = [lg.level for lg in loggers]
    yield
    for lg, level in zip(loggers, levels):
        lg.setLevel(level)
