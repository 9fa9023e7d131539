#!/usr/bin/env python3
"""Entry point for the fwharden command."""

import sys
import logging
import argparse

from . import __version__
from .core.config_manager import ConfigManager
from .core.errors import HardeningError
from .core.installer import OverrideInstaller
from .core.service_manager import ServiceManager
from .utils.constants import APP_NAME, LOG_FORMAT, SERVICE_NAME

logger = logging.getLogger(__name__)

MUTATING_COMMANDS = ("install", "revert")


def setup_logging(config_manager: ConfigManager, verbose: bool = False):
    """Set up application logging.

    Args:
        config_manager: Loaded settings
        verbose: Force DEBUG level
    """
    level = logging.DEBUG if verbose else config_manager.get_log_level()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
        force=True
    )


def attach_log_file(config_manager: ConfigManager) -> bool:
    """Add the configured log file to the root logger.

    An unusable path is reported and otherwise ignored.

    Args:
        config_manager: Loaded settings

    Returns:
        True if a file handler was added
    """
    log_file = config_manager.get_setting("log_file")
    if not log_file:
        return False

    try:
        handler = logging.FileHandler(log_file)
    except OSError as e:
        logger.warning(f"Cannot open log file {log_file}: {e}")
        return False

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(handler)
    return True


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser.

    Returns:
        Parser; with no subcommand the override is installed
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"Apply a systemd hardening override to {SERVICE_NAME} and restart it"
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--config', default=None,
                        help='Settings file (default: /etc/fwharden/config.yaml)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.add_parser('install', help='Write the override and restart the service (default)')
    subparsers.add_parser('revert', help='Remove the override and restart the service')
    subparsers.add_parser('verify', help='Check that the installed override matches the template')
    subparsers.add_parser('show', help='Print the override content')
    subparsers.add_parser('status', help='Print the service ActiveState')

    return parser


def run_command(command: str, installer: OverrideInstaller, quiet: bool = False) -> int:
    """Run one subcommand.

    Args:
        command: Subcommand name
        installer: Installer to run it with
        quiet: Suppress the status message on stdout

    Returns:
        Process exit code
    """
    if command == "show":
        sys.stdout.write(installer.render())
        return 0

    if command == "status":
        status = installer.service_manager.get_service_status(installer.service_name)
        print(f"{installer.service_name}: {status.value}")
        return 0

    if command == "verify":
        result = installer.verify()
        if not result.exists:
            print(f"{result.path}: not installed")
            return 1
        if result.matches:
            print(f"{result.path}: matches")
            return 0
        print(f"{result.path}: differs")
        for marker, line in result.differences:
            print(f"  {marker} {line}")
        return 1

    if command == "revert":
        message = installer.revert()
    else:
        message = installer.install()

    if not quiet:
        print(message)
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config_manager = ConfigManager(args.config)
    config_manager.load_config()
    setup_logging(config_manager, args.verbose)

    installer = OverrideInstaller(service_manager=ServiceManager())
    command = args.command or "install"
    logger.debug(f"Running {command}")

    try:
        # Nothing, not even the log file, is created before the root check
        if command in MUTATING_COMMANDS:
            installer.check_privilege()
        attach_log_file(config_manager)

        return run_command(command, installer, config_manager.get_setting("quiet", False))

    except HardeningError as e:
        logger.error(str(e))
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
