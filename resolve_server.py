#!/usr/bin/env python3
"""
Daemon Profile Resolver

Builds a server profile from the command line and shows how it resolves:
display name, identifiers, and the endpoint used on the current network.

Usage:
    python resolve_server.py --type Transmission --address seedbox.example.com
    python resolve_server.py --type Deluge --address nas.example.com \\
        --local-address 192.168.1.10 --local-network HomeWifi --network HomeWifi
    python resolve_server.py --type qBittorrent --address host --json
"""

import argparse
import logging
import sys
from typing import List, Optional

from daemon_profiles import Daemon, OS, ServerProfile, ProfileFormatter
from daemon_profiles.config import ProfileDefaults, load_environment, setup_logging

logger = logging.getLogger(__name__)


def build_parser(default_port: int = 9091, default_timeout: int = 8,
                 default_os: OS = OS.LINUX) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve a download daemon server profile for the current network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Remote endpoint only
  python resolve_server.py --type Transmission --address seedbox.example.com --port 9091

  # Local override, resolved while attached to HomeWifi
  python resolve_server.py --type Deluge --address nas.example.com \\
      --local-address 192.168.1.10 --local-port 8112 --local-network HomeWifi --network HomeWifi

  # Show results as JSON
  python resolve_server.py --type rTorrent --address host --folder /RPC2 --json
        """
    )

    parser.add_argument("--key", "-k", type=int, default=0, help="Profile key (default: 0)")
    parser.add_argument("--name", "-n", help="Server label")
    parser.add_argument(
        "--type", "-t",
        type=Daemon,
        choices=list(Daemon),
        metavar="DAEMON",
        help="Daemon type: " + ", ".join(str(d) for d in Daemon)
    )
    parser.add_argument("--address", "-a", default="", help="Remote host name or IP")
    parser.add_argument("--port", "-p", type=int, default=default_port, help="Remote port")
    parser.add_argument("--local-address", help="Host name or IP inside the local network")
    parser.add_argument("--local-port", type=int, default=0, help="Port inside the local network")
    parser.add_argument("--local-network", help="Name of the local network (SSID)")
    parser.add_argument(
        "--network",
        help="Network currently attached to (default: CURRENT_NETWORK env var)"
    )
    parser.add_argument("--ssl", action="store_true", help="Connect over HTTPS")
    parser.add_argument("--folder", help="Custom folder / mount point on the daemon")
    parser.add_argument("--username", "-u", help="User name (enables authentication)")
    parser.add_argument(
        "--os",
        type=OS,
        choices=list(OS),
        default=default_os,
        metavar="OS",
        help="Operating system of the daemon host: " + ", ".join(str(o) for o in OS)
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=default_timeout,
        help="Connection timeout in seconds"
    )
    parser.add_argument(
        "--auto-generated",
        action="store_true",
        help="Treat the profile as generated by the application"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["list", "json"],
        default="list",
        help="Output format: list (default) or json"
    )
    parser.add_argument("--json", "-j", action="store_true", help="Output as JSON (shortcut for --format json)")
    parser.add_argument("--env-file", "-e", help="Path to .env file with defaults")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def profile_from_args(args: argparse.Namespace) -> ServerProfile:
    """Build a ServerProfile from parsed command line arguments"""
    return ServerProfile(
        key=args.key,
        name=args.name,
        type=args.type,
        address=args.address,
        port=args.port,
        local_address=args.local_address,
        local_port=args.local_port,
        local_network=args.local_network,
        ssl=args.ssl,
        folder=args.folder,
        use_authentication=bool(args.username),
        username=args.username,
        os=args.os,
        timeout=args.timeout,
        is_auto_generated=args.auto_generated,
    )


def main(argv: Optional[List[str]] = None) -> int:
    # The env file supplies the argument defaults, so load it before the full parse
    env_parser = argparse.ArgumentParser(add_help=False)
    env_parser.add_argument("--env-file", "-e")
    env_args, _ = env_parser.parse_known_args(argv)
    if env_args.env_file:
        load_environment(env_args.env_file)

    try:
        parser = build_parser(
            default_port=ProfileDefaults.port(),
            default_timeout=ProfileDefaults.timeout_seconds(),
            default_os=OS(ProfileDefaults.os_name()),
        )
    except ValueError as e:
        logger.error(f"Invalid profile defaults in environment: {e}")
        print(f"\n❌ Invalid profile defaults in environment: {e}", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    if args.local_network and not args.local_address:
        logger.error("--local-network given without --local-address")
        print("\n❌ --local-network requires --local-address", file=sys.stderr)
        return 1

    current_network = args.network if args.network is not None else ProfileDefaults.current_network()
    profile = profile_from_args(args)

    output_format = "json" if args.json else args.format
    formatter = ProfileFormatter(output_format=output_format)
    print(formatter.format(profile, current_network))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}")
        sys.exit(1)
