"""Tests for ProfileFormatter and the resolve_server command line."""

import json

import pytest

import resolve_server
from daemon_profiles import Daemon, ProfileFormatter, ServerProfile


class TestProfileFormatter:
    """Test profile output formats."""

    def test_list_format_local(self, home_profile: ServerProfile) -> None:
        """Test the list format shows identity and the local endpoint."""
        output = ProfileFormatter().format(home_profile, "HomeWifi")

        assert "Server: Seedbox" in output
        assert "Unique ID:   Transmission|https://bob@seedbox.example.com:9091/transmission" in output
        assert "Network:     HomeWifi (local)" in output
        assert "Connect to:  https://192.168.1.10:9092/transmission" in output
        assert "Timeout:     30000 ms" in output
        assert "secret" not in output

    def test_list_format_without_type(self) -> None:
        """Test profiles still being configured are shown without failing."""
        profile = ServerProfile(key=1, address="host", port=80)
        output = ProfileFormatter("list").format(profile)

        assert "(not yet identifiable)" in output
        assert "Network:     unknown (remote)" in output
        assert "Connect to:  host:80" in output

    def test_json_format(self, home_profile: ServerProfile) -> None:
        """Test the JSON format carries the resolved endpoint."""
        data = json.loads(ProfileFormatter("json").format(home_profile, "Office"))

        assert data["key"] == 7
        assert data["type"] == "Transmission"
        assert data["local"] is False
        assert (data["address"], data["port"]) == ("seedbox.example.com", 9091)
        assert data["timeout_ms"] == 30000
        assert "password" not in data


class TestResolveServerCli:
    """Test the resolve_server entry point."""

    def test_resolves_local_endpoint(self, capsys) -> None:
        """Test the local override is used for the matching network."""
        code = resolve_server.main([
            "--type", "Deluge",
            "--address", "nas.example.com",
            "--port", "8112",
            "--local-address", "192.168.1.10",
            "--local-port", "8112",
            "--local-network", "HomeWifi",
            "--network", "HomeWifi",
            "--json",
        ])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["address"] == "192.168.1.10"
        assert data["local"] is True

    def test_network_from_environment(self, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test CURRENT_NETWORK is used when --network is omitted."""
        monkeypatch.setenv("CURRENT_NETWORK", "HomeWifi")
        code = resolve_server.main([
            "-t", "Transmission",
            "-a", "remote.example.com",
            "--local-address", "10.0.0.2",
            "--local-network", "HomeWifi",
            "-f", "json",
        ])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["address"] == "10.0.0.2"

    def test_list_output_with_username(self, capsys) -> None:
        """Test the list output and the username enabling authentication."""
        code = resolve_server.main([
            "--type", "rTorrent",
            "--address", "host",
            "--port", "80",
            "--folder", "/RPC2",
            "--username", "bob",
            "--network", "Office",
        ])

        assert code == 0
        assert "rTorrent|http://bob@host:80/RPC2" in capsys.readouterr().out

    @pytest.mark.parametrize("variable, value, field, expected", [
        ("DAEMON_PORT", "1234", "port", 1234),
        ("DAEMON_TIMEOUT_SECONDS", "99", "timeout_ms", 99000),
        ("DAEMON_OS", "Mac", "os", "Mac"),
    ])
    def test_env_file_supplies_defaults(
        self, tmp_path, capsys, monkeypatch: pytest.MonkeyPatch, variable, value, field, expected
    ) -> None:
        """Test port, timeout and OS defaults come from the --env-file."""
        monkeypatch.setenv(variable, "1")
        env_file = tmp_path / "daemon.env"
        env_file.write_text(f"{variable}={value}\n")

        code = resolve_server.main([
            "--type", "Transmission",
            "--address", "host",
            "--env-file", str(env_file),
            "--json",
        ])

        assert code == 0
        assert json.loads(capsys.readouterr().out)[field] == expected

    def test_invalid_os_in_environment(self, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a bad DAEMON_OS is reported with exit code 1."""
        monkeypatch.setenv("DAEMON_OS", "Plan9")

        code = resolve_server.main(["--address", "host"])

        assert code == 1
        assert "❌ Invalid profile defaults in environment" in capsys.readouterr().err

    def test_local_network_requires_local_address(self, capsys) -> None:
        """Test an incomplete local override is rejected."""
        code = resolve_server.main(["--address", "host", "--local-network", "HomeWifi"])
        assert code == 1
        assert "--local-address" in capsys.readouterr().err

    def test_unknown_daemon_type(self) -> None:
        """Test argparse rejects unknown daemon types."""
        with pytest.raises(SystemExit) as exc_info:
            resolve_server.main(["--type", "NotADaemon", "--address", "host"])
        assert exc_info.value.code == 2

    def test_profile_from_args(self) -> None:
        """Test parsed arguments map onto profile fields."""
        args = resolve_server.build_parser().parse_args([
            "--key", "4",
            "--type", "Vuze",
            "--address", "host",
            "--ssl",
            "--os", "Windows",
            "--timeout", "15",
            "--auto-generated",
        ])
        profile = resolve_server.profile_from_args(args)

        assert profile.key == 4
        assert profile.type is Daemon.VUZE
        assert profile.ssl is True
        assert str(profile.os) == "Windows"
        assert profile.get_timeout_in_milliseconds() == 15000
        assert profile.use_authentication is False
        assert profile.get_human_readable_identifier() == "host"
