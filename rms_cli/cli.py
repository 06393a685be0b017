"""
RMS CLI - Main entry point.

Command-line front end for the random menu selector.
"""

import argparse
import logging
import shlex
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO

from rms_zone import CatalogNotFoundError, pick
from rms_mqtt import SelectionPublisher, create_logger
from rms_service import (
    AppConfig,
    CommandNotAvailableError,
    CommandRegistry,
    MenuSelectorService,
)

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def load_config(
    config_path: Optional[Path],
    seed: Optional[int],
    catalog: Optional[str] = None,
) -> AppConfig:
    """
    Load YAML configuration (or the built-in one) and apply CLI overrides.

    Raises:
        CatalogNotFoundError: If catalog is not configured
    """
    config = AppConfig.from_yaml(config_path) if config_path else AppConfig.default()

    if seed is not None:
        config = replace(config, selector=replace(config.selector, seed=seed))
    if catalog is not None:
        if catalog not in config.catalogs:
            raise CatalogNotFoundError(
                f"Catalog '{catalog}' not found. "
                f"Available catalogs: {', '.join(config.catalogs)}"
            )
        config = replace(config, default_catalog=catalog)
    return config


def build_publisher(config: AppConfig) -> Optional[SelectionPublisher]:
    """Create and connect the selection publisher when MQTT is enabled."""
    mqtt_config = config.mqtt_config
    if not mqtt_config.enabled:
        return None

    publisher = SelectionPublisher(
        broker_host=mqtt_config.broker,
        broker_port=mqtt_config.port,
        topic=mqtt_config.topic_for(config.service_id),
        client_id=f"rms_{config.service_id}_selection",
        logger=create_logger("publisher"),
        username=mqtt_config.username,
        password=mqtt_config.password,
        qos=mqtt_config.qos,
    )
    if not publisher.connect(timeout=5.0):
        logger.warning(f"MQTT broker {publisher.broker} unavailable; selections will not be published")
    return publisher


def run_shell(
    service: MenuSelectorService,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Line-oriented selector session.

    Reads one command per line until EOF or quit; prints every selection
    change as it happens.

    Returns:
        Number of commands that failed
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    registry = CommandRegistry()
    service.register_commands(registry)
    registry.register('help', lambda args: _format_help(registry), "Show commands")

    subscription = service.subscribe(
        lambda zone: print(f"Zone: {zone if zone is not None else '(none)'}", file=stdout)
    )
    failures = 0

    try:
        for line in stdin:
            try:
                tokens = shlex.split(line)
            except ValueError as e:
                print(f"Error: {e}", file=stdout)
                failures += 1
                continue

            if not tokens:
                continue
            command, args = tokens[0], tokens[1:]
            if command in QUIT_COMMANDS:
                break

            try:
                result = registry.execute(command, args)
            except (CommandNotAvailableError, LookupError, ValueError) as e:
                print(f"Error: {e}", file=stdout)
                failures += 1
                continue

            # Selections are echoed by the observer
            if result is not None and command not in {'pick', 'choose'}:
                print(result, file=stdout)
    finally:
        service.unsubscribe(subscription)

    return failures


def _format_help(registry: CommandRegistry) -> str:
    lines = [f"  {name:<10} {description}" for name, description in sorted(registry.get_help().items())]
    lines.append(f"  {'quit':<10} Leave the session")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rms-cli",
        description="RMS CLI - Random Menu Selector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Pick a zone from the default catalog
  rms-cli pick

  # Reproducible picks from a named catalog
  rms-cli --catalog zones_kr --seed 7 pick --count 3

  # Never return the given zone (unless it is the only one)
  rms-cli pick --exclude sector3

  # Interactive session with a custom configuration
  rms-cli --config config/rms_config.yaml shell

  rms-cli list-zones
  rms-cli list-catalogs
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration YAML (default: built-in catalogs)"
    )
    parser.add_argument(
        "--catalog",
        default=None,
        help="Catalog to use (default: configured default_catalog)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible picks"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    pick_cmd = subparsers.add_parser('pick', help='Pick random zones')
    pick_cmd.add_argument('--exclude', default=None, help='Zone that must not be returned')
    pick_cmd.add_argument('--count', type=int, default=1, help='Number of independent picks')

    subparsers.add_parser('list-zones', help='List zones of the catalog')
    subparsers.add_parser('list-catalogs', help='List configured catalogs')
    subparsers.add_parser('shell', help='Interactive selector session')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level)

    try:
        config = load_config(args.config, args.seed, args.catalog)
        service = MenuSelectorService(config)

        if args.command == 'pick':
            if args.count < 1:
                raise ValueError(f"--count must be >= 1, got {args.count}")
            catalog = service.active_catalog
            for _ in range(args.count):
                print(pick(catalog, service.rng, exclude=args.exclude,
                           max_redraws=config.selector.max_redraws))

        elif args.command == 'list-zones':
            for zone in service.zones():
                print(zone)

        elif args.command == 'list-catalogs':
            active = service.active_catalog.name
            for name in service.catalog_names():
                print(f"{'*' if name == active else ' '} {name}")

        elif args.command == 'shell':
            # Catalogs are valid by now; only then open the broker connection
            service = MenuSelectorService(config, publisher=build_publisher(config), rng=service.rng)
            try:
                run_shell(service)
            finally:
                service.close()

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
