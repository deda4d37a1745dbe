# SPDX-License-Identifier: MIT
"""
leaksplit - Command Line Interface

Splits a gitleaks JSON report into unique and duplicate findings:
- leaksplit report.json               duplicate fingerprints, sorted
- leaksplit --unique report.json      unique fingerprints, sorted
- leaksplit --format json report.json duplicate findings as JSON
"""

import argparse
import logging
import sys

from . import __version__
from .config import load_config
from .core.exceptions import LeakSplitError
from .core.findings import SCHEMAS
from .core.partition import partition_findings
from .render.output import OutputFormat, render, write_output
from .report.loader import read_report

LOG_FORMAT = "[leaksplit] %(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="leaksplit",
        description="Split a gitleaks report into unique and duplicate findings.",
    )
    p.add_argument("-V", "--version", action="store_true", help="print version and exit")
    p.add_argument("report_path", nargs="?", help="path to the gitleaks JSON report")
    # None means "not given", so config values apply
    p.add_argument(
        "-u", "--unique",
        action="store_true",
        default=None,
        help="print unique findings rather than duplicates",
    )
    p.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="output format (default: text)",
    )
    p.add_argument(
        "--schema",
        choices=list(SCHEMAS),
        default=None,
        help="finding shape to require (default: minimal)",
    )
    p.add_argument(
        "--no-sort",
        dest="sort",
        action="store_false",
        default=None,
        help="keep report order in text output",
    )
    p.add_argument(
        "--redact",
        action="store_true",
        default=None,
        help="redact secrets in JSON output",
    )
    p.add_argument("-c", "--config", help="path to a leaksplit YAML config file")

    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log debug messages")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only log warnings and errors")
    return p


def configure_logging(level: str) -> None:
    """Send diagnostics to stderr at the given level."""
    logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)
    logging.getLogger("leaksplit").setLevel(level)


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if not args.report_path:
        p.error("the following arguments are required: report_path")

    configure_logging(_cli_log_level(args) or "INFO")

    try:
        return run(args)
    except LeakSplitError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


def run(args) -> int:
    """Load, partition and render the report named on the command line."""
    config = load_config(args.config)
    if not _cli_log_level(args):
        logging.getLogger("leaksplit").setLevel(config["log_level"])

    settings = _merge_settings(args, config)

    report = read_report(args.report_path, schema=settings["schema"])
    logger.info("gitleaks report contains %d findings", len(report))

    result = partition_findings(report)
    logger.info("%d unique findings, %d duplicates", len(result.unique), len(result.duplicated))

    findings = result.select(unique=settings["unique"])
    output_format = OutputFormat(settings["format"])
    logger.debug(
        "rendering %d %s findings as %s",
        len(findings),
        "unique" if settings["unique"] else "duplicate",
        output_format.value,
    )

    data = render(findings, output_format, sort=settings["sort"], redact=settings["redact"])
    write_output(data, sys.stdout.buffer)
    return 0


def _cli_log_level(args):
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "WARNING"
    return None


def _merge_settings(args, config):
    """Command line flags win over config values."""
    settings = dict(config)
    for key in ("unique", "format", "schema", "sort", "redact"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    return settings


if __name__ == "__main__":
    raise SystemExit(main())
