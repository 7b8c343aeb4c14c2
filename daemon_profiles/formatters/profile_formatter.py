"""
Profile formatter - Displays a profile's identity and resolved connection.

Output format:
Server: Seedbox
============================================================
  Identifier:  https://bob@seedbox.example.com:443
  Unique ID:   Transmission|https://bob@seedbox.example.com:443
  Network:     HomeWifi (local)
  Connect to:  https://192.168.1.10:9091
"""

import json
from typing import Optional

from .base_formatter import OutputFormatter
from ..models import ServerProfile


class ProfileFormatter(OutputFormatter):
    """
    Formatter for a single resolved profile. Secrets are never printed.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'json')
        """
        self.output_format = output_format

    def format(self, profile: ServerProfile, current_network: Optional[str] = None) -> str:
        if self.output_format == "json":
            return self._format_json(profile, current_network)
        return self._format_list(profile, current_network)

    def _format_list(self, profile: ServerProfile, current_network: Optional[str]) -> str:
        """Format as indented key/value lines"""
        lines = [f"\nServer: {profile.get_name()}", "=" * 60]

        lines.append(f"  Identifier:  {profile.get_human_readable_identifier()}")
        lines.append(f"  Unique ID:   {profile.get_unique_identifier() or '(not yet identifiable)'}")

        scope = "local" if profile.is_on_local_network(current_network) else "remote"
        lines.append(f"  Network:     {current_network or 'unknown'} ({scope})")

        if profile.type is not None:
            settings = profile.resolve_connection_parameters(current_network)
            lines.append(f"  Daemon:      {profile.type}")
            lines.append(f"  Connect to:  {settings.get_base_url()}")
            lines.append(f"  Timeout:     {settings.get_timeout_in_milliseconds()} ms")
        else:
            address, port = profile.resolve_address(current_network)
            lines.append(f"  Connect to:  {address}:{port}")

        return "\n".join(lines)

    def _format_json(self, profile: ServerProfile, current_network: Optional[str]) -> str:
        """Format as JSON"""
        address, port = profile.resolve_address(current_network)
        output = {
            "key": profile.key,
            "name": profile.get_name(),
            "type": str(profile.type) if profile.type is not None else None,
            "human_readable_identifier": profile.get_human_readable_identifier(),
            "unique_identifier": profile.get_unique_identifier(),
            "current_network": current_network,
            "local": profile.is_on_local_network(current_network),
            "address": address,
            "port": port,
            "ssl": profile.ssl,
            "os": str(profile.os),
            "timeout_ms": profile.get_timeout_in_milliseconds(),
        }
        return json.dumps(output, indent=2)
