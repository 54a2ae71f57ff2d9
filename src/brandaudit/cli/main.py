"""CLI entrypoint for the brand audit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from brandaudit import __version__
from brandaudit.brand import brand_context
from brandaudit.config import AuditConfig, load_config
from brandaudit.constants.branding import CLI_DESCRIPTION
from brandaudit.exceptions import BrandAuditError, ConfigError
from brandaudit.exceptions.validation import format_errors
from brandaudit.reporting.stdout import StdoutReporter, render_start_banner
from brandaudit.scanner import audit_tree
from brandaudit.validation import preflight_validate

COMMAND_AUDIT = "audit"
COMMAND_VALIDATE_CONFIG = "validate-config"
COMMAND_BRAND = "brand"


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser.

    Running with no arguments audits the current working directory.
    """
    parser = argparse.ArgumentParser(prog="brandaudit", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Scan root (default: current directory)")
    parser.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging and scan counts")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser(COMMAND_AUDIT, help="Scan for legacy brand references (default)")
    subparsers.add_parser(COMMAND_VALIDATE_CONFIG, help="Validate configuration without scanning")
    subparsers.add_parser(COMMAND_BRAND, help="Show current brand values and check required fields")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns 0 when clean, 1 when legacy tokens remain, 2 on config errors."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    command = args.command or COMMAND_AUDIT

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2
    if command == COMMAND_VALIDATE_CONFIG:
        print("Configuration is valid.")
        return 0

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if command == COMMAND_BRAND:
        return _handle_brand(config)

    print(render_start_banner(str(args.root.resolve()), len(config.tokens)), flush=True)
    try:
        report = audit_tree(args.root, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except BrandAuditError as exc:
        print(f"Audit error: {exc}", file=sys.stderr)
        return 1

    use_color = not args.no_color and sys.stdout.isatty()
    print(StdoutReporter(report, color=use_color, verbose=args.verbose).render())
    return report.exit_code


def _handle_brand(config: AuditConfig) -> int:
    """Print the derived brand values; missing required fields are advisory only."""
    for key, value in brand_context(config.brand).items():
        print(f"{key:<18} {value}")
    if config.brand.validate():
        print("Brand configuration is complete.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
