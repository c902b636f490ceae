"""Command line entry point for GZD Mapper."""

from __future__ import annotations

import argparse
import logging
import sys

from tomlkit.exceptions import TOMLKitError

from domain.models import ExportSettings
from domain.profiles import load_profile
from geo.lookup import determine_gzd
from services.export_service import export_with_settings
from shared.constants import (
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    LOG_FORMAT,
)

logger = logging.getLogger(__name__)


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure application logging to stderr; stdout is reserved for GeoJSON."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gzd-mapper',
        description='GZD Mapper - UTM/MGRS grid zone designators as GeoJSON',
    )
    parser.add_argument('--profile', help='Export profile name or path to a TOML file')
    parser.add_argument('--log-level', default=None, help='Logging level (default: INFO)')

    sub = parser.add_subparsers(dest='command', required=True)

    def add_export_options(p: argparse.ArgumentParser) -> None:
        p.add_argument('-o', '--output', help='Output GeoJSON file (stdout when omitted)')
        p.add_argument('--indent', type=int, default=None, help='JSON indent')
        p.add_argument(
            '--no-polar',
            action='store_true',
            help='Skip polar regions A, B, X, Y',
        )

    p_all = sub.add_parser('all', help='Export every grid zone')
    add_export_options(p_all)

    p_zone = sub.add_parser('zone', help='Export named grid zones, e.g. 33V A')
    p_zone.add_argument('names', nargs='*', help='Zone names; the profile zones are used when omitted')
    add_export_options(p_zone)

    p_lookup = sub.add_parser('lookup', help='Print the zone containing a point')
    p_lookup.add_argument('lng', type=float)
    p_lookup.add_argument('lat', type=float)

    return parser


def _resolve_settings(args: argparse.Namespace) -> ExportSettings:
    settings = load_profile(args.profile) if args.profile else ExportSettings()
    overrides: dict = {}
    if args.log_level:
        overrides['log_level'] = args.log_level
    if args.command in ('all', 'zone'):
        if args.output:
            overrides['output_path'] = args.output
        if args.indent is not None:
            overrides['indent'] = args.indent
        if args.no_polar:
            overrides['include_polar'] = False
    if args.command == 'zone':
        zones = args.names or settings.zones
        if not zones:
            msg = 'No zone names given and the profile lists none'
            raise ValueError(msg)
        overrides['zones'] = zones
    elif args.command == 'all':
        overrides['zones'] = []
    return ExportSettings.model_validate({**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = _resolve_settings(args)
    except (ValueError, FileNotFoundError, TOMLKitError) as e:
        setup_logging()
        logger.error('Invalid settings: %s', e)
        return EXIT_INVALID_INPUT
    except OSError as e:
        setup_logging()
        logger.error('Failed to read profile: %s', e)
        return EXIT_FAILURE

    setup_logging(settings.log_level)

    try:
        if args.command == 'lookup':
            print(determine_gzd(args.lng, args.lat))
        else:
            text = export_with_settings(settings)
            if text:
                print(text)
    except (ValueError, TypeError) as e:
        logger.error('%s', e)
        return EXIT_INVALID_INPUT
    except Exception as e:
        logger.error(f'Export failed: {e}', exc_info=True)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
