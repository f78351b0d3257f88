"""fabricweaver command line interface.

    fabricweaver update
    fabricweaver setup --fabric-version 2.5.12 --ca-version 1.5.15 --components binary docker --dest ./network
"""
import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import List, Optional

from fabricweaver.installer.fabric_installer import FabricInstaller
from fabricweaver.shared.modules.command.errors import CommandExecutionError, InstallerError
from fabricweaver.shared.modules.config.settings import WeaverSettings
from fabricweaver.shared.modules.log.logger import configure_logging, get_logger

COMPONENTS = ("binary", "docker", "podman", "samples")

logger = get_logger("cli")


def _package_version() -> str:
    try:
        return version("fabricweaver")
    except PackageNotFoundError:
        return "0.0.0"


def cmd_update(args: argparse.Namespace, installer: FabricInstaller) -> int:
    installer.update_install_script()
    return 0


def cmd_setup(args: argparse.Namespace, installer: FabricInstaller) -> int:
    installer.setup(
        fabric_version=args.fabric_version,
        ca_version=args.ca_version,
        components=args.components,
        dest=args.dest,
    )
    return 0


def build_parser(settings: Optional[WeaverSettings] = None) -> argparse.ArgumentParser:
    settings = settings or WeaverSettings.from_env()
    parser = argparse.ArgumentParser(
        prog="fabricweaver",
        description="Download and install Hyperledger Fabric binaries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("update", help="Download the latest install-fabric.sh")
    p.set_defaults(func=cmd_update)

    p = sub.add_parser("setup", help="Install Fabric components with the downloaded script")
    p.add_argument(
        "--fabric-version",
        default=settings.fabric_version,
        help="Fabric version, overrides FABRIC_VERSION (default: %(default)s)",
    )
    p.add_argument(
        "--ca-version",
        default=settings.ca_version,
        help="Fabric CA version, overrides FABRIC_CA_VERSION (default: %(default)s)",
    )
    p.add_argument(
        "--components",
        nargs="+",
        choices=COMPONENTS,
        default=["binary"],
        help="Components to install (default: binary)",
    )
    p.add_argument("--dest", default=None, help="Copy the generated config files into this directory")
    p.set_defaults(func=cmd_setup)
    return parser


def main(argv: Optional[List[str]] = None, installer: Optional[FabricInstaller] = None) -> int:
    settings = WeaverSettings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    installer = installer or FabricInstaller(settings=settings)

    try:
        return args.func(args, installer)
    except (CommandExecutionError, InstallerError) as e:
        logger.error(f"❌ {e}")
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
