"""CLI entry-point for contract_validator.

Usage:
    python -m contract_validator --spec openapi.yaml --base-url https://api.example.com
    python -m contract_validator -s openapi.yaml -u http://localhost:8080 -o report.html
    python -m contract_validator -s openapi.yaml -u http://localhost:8080 --format json -o out.json
    python -m contract_validator -s openapi.yaml -u http://localhost:8080 --fail-on-warnings
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jsonschema

from contract_validator import __version__
from contract_validator.api import validate_contract
from contract_validator.config import Settings
from contract_validator.errors import ConfigurationError, ContractLoadError
from contract_validator.policy.exit_codes import (
    DEFAULT_POLICY,
    ExitCode,
    STRICT_POLICY,
    exit_code_for_result,
)
from contract_validator.reports.exporters import FORMATS, export_result, select_format

_logger = logging.getLogger("contract_validator")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="contract-validator",
        description="Validates API implementation against OpenAPI specification.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-s",
        "--spec",
        dest="spec_path",
        required=True,
        help="Path to OpenAPI spec file (YAML/JSON).",
    )
    p.add_argument(
        "-u",
        "--base-url",
        dest="base_url",
        required=True,
        help="Base URL of the API to validate (e.g. https://api.example.com).",
    )
    p.add_argument(
        "-o",
        "--output",
        dest="output_path",
        default=None,
        help="Output report file (default: console on stdout).",
    )
    p.add_argument(
        "--format",
        dest="report_format",
        choices=FORMATS,
        default=None,
        help="Report format (default: inferred from --output suffix).",
    )
    p.add_argument(
        "--connect-timeout",
        dest="connect_timeout",
        type=float,
        default=None,
        help="Connect timeout in seconds.",
    )
    p.add_argument(
        "--read-timeout",
        dest="read_timeout",
        type=float,
        default=None,
        help="Read timeout in seconds.",
    )
    p.add_argument(
        "--fail-on-warnings",
        dest="fail_on_warnings",
        action="store_true",
        default=False,
        help="Exit 1 when only WARNING issues are found.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )
    return p


def _configure_logging(verbose: bool, settings: Settings) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = Settings()
    if args.connect_timeout is not None:
        settings.CONNECT_TIMEOUT = args.connect_timeout
    if args.read_timeout is not None:
        settings.READ_TIMEOUT = args.read_timeout
    return settings


def _write_report(text: str, output_path: str | None) -> None:
    if not output_path:
        sys.stdout.write(text)
        return
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    _logger.info("Report saved to: %s", out)


def main(argv: list[str] | None = None) -> int:
    """Entry-point: returns an exit code (0 = passed, 1 = contract errors, 2 = usage/runtime error)."""
    args = _build_parser().parse_args(argv)
    try:
        settings = _settings_from_args(args)
    except ConfigurationError as e:
        print(f"error: invalid settings: {e}", file=sys.stderr)
        return ExitCode.ERROR
    _configure_logging(args.verbose, settings)

    _logger.info("Starting API contract validation")
    _logger.info("Spec file: %s", args.spec_path)
    _logger.info("Base URL:  %s", args.base_url)

    try:
        fmt = select_format(args.output_path, args.report_format)
        result = validate_contract(args.spec_path, args.base_url, settings=settings)
        _write_report(export_result(result, fmt), args.output_path)
    except (ConfigurationError, ValueError) as e:
        print(f"error: invalid arguments: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except ContractLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR
    except jsonschema.ValidationError as e:
        # report JSON did not match the bundled result schema
        print(f"error: report failed schema validation: {e.message}", file=sys.stderr)
        return ExitCode.ERROR
    except OSError as e:
        print(f"error: cannot write report: {e}", file=sys.stderr)
        return ExitCode.ERROR

    policy = STRICT_POLICY if args.fail_on_warnings else DEFAULT_POLICY
    return exit_code_for_result(result, policy=policy)


if __name__ == "__main__":
    raise SystemExit(main())
