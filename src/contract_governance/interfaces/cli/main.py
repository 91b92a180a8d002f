import argparse
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

import colorlog

from contract_governance.core.enums import RecordType

# Record type choices for argparse - used across all commands
RECORD_TYPE_CHOICES = list(RecordType.__members__.keys())

# summarize subcommand -> record type its input must validate as
SUMMARY_RECORD_TYPES = {
    "budget": RecordType.BUDGET,
    "lag": RecordType.SCHEDULE,
    "compliance": RecordType.COMPLIANCE,
}

try:
    from contract_governance import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover - defensive fallback
    _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _report_path(option: Any, input_path: Path, suffix: str) -> Path:
    """Resolve where a report for ``input_path`` goes.

    ``option`` is True for the default location (next to the input file) or a
    directory path given on the command line. The input's extension is part of
    the name, so ``budget.yaml`` and ``budget.json`` get separate reports.
    """
    if option is True:
        report_dir = input_path.parent
    else:
        report_dir = Path(option)
    parts = [input_path.stem]
    if input_path.suffix:
        parts.append(input_path.suffix.lstrip(".").lower())
    return report_dir / f"{'_'.join(parts)}_validation{suffix}"


def _write_report(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one or more record files of a single record type.

    Missing or unreadable inputs only emit warnings/errors, and the command
    succeeds if at least one input was validated (with or without errors).

    Returns:
        0 if all validations passed without errors
        1 if no inputs were validated
        2 if any validation errors were found (or warnings, with --strict)
    """
    from contract_governance.validation import registry

    try:
        record_type = RecordType[args.record_type]
    except KeyError:
        valid_types = ", ".join(t.value for t in RecordType)
        logging.error(
            "Unknown record type: '%s'. Valid types: %s",
            args.record_type,
            valid_types,
        )
        return 2

    strict = bool(getattr(args, "strict", False))
    report_md = getattr(args, "report", False)
    report_json = getattr(args, "report_json", False)

    validation_results: List[Dict[str, Any]] = []
    total_failures = 0
    successful_validations = 0

    for input_arg in args.input:
        input_path = Path(input_arg).resolve()
        logging.info("Validating %s (%s)...", input_path.name, record_type.value)

        try:
            report = registry.validate_file(record_type, input_path)
        except FileNotFoundError as e:
            logging.warning("Input not found: %s", e)
            validation_results.append(
                {"input": input_path.name, "status": "MISSING", "errors": 0, "warnings": 0,
                 "reason": str(e)}
            )
            continue
        except (ValueError, OSError) as e:
            logging.error("Error validating %s: %s", input_path.name, e)
            validation_results.append(
                {"input": input_path.name, "status": "ERROR", "errors": 0, "warnings": 0,
                 "reason": str(e)}
            )
            continue

        has_errors = report.has_errors(strict=strict)
        error_count = report.get_error_count()
        warning_count = report.get_warning_count()

        if has_errors:
            total_failures += error_count + (warning_count if strict else 0)
            logging.warning(
                "Validation failed for %s: %d errors, %d warnings",
                input_path.name,
                error_count,
                warning_count,
            )
        else:
            logging.info("Validation passed for %s", input_path.name)

        registry.print_report(report)

        if report_md:
            report_path = _report_path(report_md, input_path, ".md")
            _write_report(report_path, report.to_markdown())
            logging.info("Markdown report saved: %s", report_path)

        if report_json:
            report_path = _report_path(report_json, input_path, ".json")
            _write_report(report_path, report.to_json())
            logging.info("JSON report saved: %s", report_path)

        successful_validations += 1
        validation_results.append(
            {
                "input": input_path.name,
                "status": "FAIL" if has_errors else "OK",
                "errors": error_count,
                "warnings": warning_count,
            }
        )

    if len(args.input) > 1 and validation_results:
        logging.info("Validation Summary:")
        for entry in validation_results:
            if entry["status"] == "OK":
                logging.info("%s: PASSED", entry["input"])
            elif entry["status"] == "FAIL":
                logging.info(
                    "%s: FAILED (%d errors, %d warnings)",
                    entry["input"],
                    entry["errors"],
                    entry["warnings"],
                )
            else:
                logging.info("%s: %s (%s)", entry["input"], entry["status"], entry.get("reason", ""))

    if successful_validations == 0:
        logging.error("No inputs were validated.")
        return 1

    if total_failures > 0:
        logging.error("Validation found %d issues across all inputs.", total_failures)
        return 2

    return 0


def cmd_summarize(args: argparse.Namespace) -> int:
    """Print a derived summary for a record file.

    The input is validated first; summaries are only computed over valid
    records.

    Returns:
        0 on success
        1 if the input could not be read
        2 if the input failed validation or the reference date is malformed
    """
    from contract_governance import summaries
    from contract_governance.ingestion.records import load_records
    from contract_governance.validation import registry
    from contract_governance.validation.predicates import is_iso_date

    record_type = SUMMARY_RECORD_TYPES[args.summary]
    input_path = Path(args.input).resolve()

    try:
        records = load_records(input_path, record_type)
    except (FileNotFoundError, ValueError, OSError) as e:
        logging.error("Cannot read %s: %s", input_path.name, e)
        return 1

    report = registry.run_validation(record_type, records, source_path=input_path)
    if report.has_errors():
        logging.error(
            "%s failed validation (%d errors); not summarizing",
            input_path.name,
            report.get_error_count(),
        )
        registry.print_report(report)
        return 2

    result: Any
    if args.summary == "budget":
        result = [summaries.summarize_budget(r) for r in records]
    elif args.summary == "lag":
        reference_date = args.reference_date or date.today().isoformat()
        if not is_iso_date(reference_date):
            logging.error("Reference date must be YYYY-MM-DD, got '%s'", reference_date)
            return 2
        # Schedule validation does not check status, but lag needs it
        no_status = [i for i, entry in enumerate(records) if "status" not in entry]
        if no_status:
            logging.error(
                "%s: status missing at index %s; not summarizing",
                input_path.name,
                ", ".join(str(i) for i in no_status),
            )
            return 2
        result = summaries.schedule_lag(records, reference_date)
        logging.info(
            "%d of %d entries lag behind %s", len(result), len(records), reference_date
        )
    else:
        result = summaries.compliance_summary(records)

    if args.json:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    elif args.summary == "budget":
        for line in result:
            print(line)
    elif args.summary == "lag":
        for entry in result:
            print(f"{entry['dueDate']}  {entry['taskId']}  {entry['milestone']} ({entry['status']})")
    else:
        for key, count in result.items():
            print(f"{key}: {count}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="contract-governance",
        description=f"Contract Governance Validation (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate governance record files")
    p_validate.add_argument(
        "--record-type",
        required=True,
        type=str.upper,
        choices=RECORD_TYPE_CHOICES,
        help="Record type of the input files (case insensitive).",
    )
    p_validate.add_argument(
        "--input",
        required=True,
        nargs="+",
        help="One or more record files (.yaml, .yml, .json or .csv)",
    )
    p_validate.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings (e.g. budget overruns) as errors",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report (one per input). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report (one per input). Optionally specify custom directory path.",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_summarize = sub.add_parser("summarize", help="Summarize validated record files")
    p_summarize.add_argument(
        "summary",
        choices=list(SUMMARY_RECORD_TYPES),
        help="budget: variance narrative; lag: overdue schedule entries; compliance: severity/status counts",
    )
    p_summarize.add_argument("--input", required=True, help="Record file to summarize")
    p_summarize.add_argument(
        "--reference-date",
        default=None,
        help="Reference date for 'lag' (YYYY-MM-DD, defaults to today)",
    )
    p_summarize.add_argument("--json", action="store_true", help="Print the summary as JSON")
    p_summarize.set_defaults(func=cmd_summarize)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
