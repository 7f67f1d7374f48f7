from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persistent storage and CLI overrides), optional persistence of the
effective configuration, dispatch of the selected sub-command and result
rendering as text or JSON.

Exit codes:
    0   success (match found, files identical, ...)
    1   negative result (no match, files differ, unreadable input)
    2   invalid input or missing path
    130 interrupted by the user
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from dirscout.core.analysis.comparator import compare_files
from dirscout.core.analysis.tree_renderer import render_tree
from dirscout.core.services.finder import find
from dirscout.core.services.listing import format_listing, list_directory
from dirscout.core.toolkit import ExplorerToolkit
from dirscout.core.validator import validate_config
from dirscout.domain.config import get_config_path, get_default_config, load_config, save_config
from dirscout.domain.models import DiffStatus, ErrorKind
from dirscout.infra.checksum import file_checksum
from dirscout.infra.fs import copy_path, make_directory, move_path
from dirscout.infra.logging import LoggingConfig, configure_logging, get_logger
from dirscout.interface.cli import args as cli_args
from dirscout.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NEGATIVE = 1
EXIT_INVALID = 2
EXIT_INTERRUPTED = 130

_INPUT_ERROR_KINDS = frozenset({
    ErrorKind.INVALID_ARGUMENT,
    ErrorKind.NOT_FOUND,
    ErrorKind.NOT_A_DIRECTORY,
})

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only until the log file is resolved)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # Out-of-range values typed on the command line are errors, not fallbacks
    bound_error = _check_numeric_args(args)
    if bound_error:
        return _report_error(args, bound_error, ErrorKind.INVALID_ARGUMENT)

    # 3. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()

    # 4. Merge command-line overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if clean_conf["log_file"]:
        configure_logging(
            LoggingConfig(level=log_level, console=True, log_file=clean_conf["log_file"]),
            force=True,
        )

    if args.save_config:
        config_path = get_config_path()
        if not save_config(clean_conf):
            return _report_error(args, i18n.t("cli.errors.save_failed", path=config_path), ErrorKind.OTHER)
        print(i18n.t("cli.status.config_saved", path=config_path), file=sys.stderr)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command and args.save_config:
        return EXIT_OK

    if not args.command:
        print(f"ERROR: {i18n.t('cli.errors.no_command')}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return EXIT_INVALID

    # 5. Command dispatch
    handler = _COMMANDS[args.command]
    try:
        return handler(args, clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _run_tree(args: Any, conf: Dict[str, Any]) -> int:
    result = render_tree(
        args.path,
        max_depth=conf["max_depth"],
        show_hidden=conf["show_hidden"],
        dirs_only=conf["dirs_only"],
        icons=conf["icons"],
        save_path=args.tree_file or "",
    )

    if args.json_output:
        _print_json(asdict(result))
    elif result.ok:
        for line in result.lines:
            print(line)
        if result.skipped:
            print(i18n.t("cli.status.skipped", count=len(result.skipped)), file=sys.stderr)

    if not result.ok:
        return _report_error(args, result.error, result.error_kind)
    return EXIT_OK


def _run_find(args: Any, conf: Dict[str, Any]) -> int:
    result = find(args.pattern, root=args.search_root, include_hidden=args.include_hidden)
    if not result.ok:
        if args.json_output:
            _print_json(asdict(result))
        return _report_error(args, i18n.t("cli.errors.invalid_input", error=result.error), result.error_kind)

    if not os.path.isdir(result.root):
        key = "cli.errors.path_not_exist" if not os.path.exists(result.root) else "cli.errors.not_a_directory"
        if args.json_output:
            _print_json(asdict(result))
        return _report_error(args, i18n.t(key, path=result.root), ErrorKind.NOT_FOUND)

    return _print_matches(args, result)


def _run_locate(args: Any, conf: Dict[str, Any]) -> int:
    toolkit = ExplorerToolkit.from_config(conf)
    result = toolkit.fast_find(args.filename)
    if not result.ok:
        if args.json_output:
            _print_json(asdict(result))
        return _report_error(args, i18n.t("cli.errors.invalid_input", error=result.error), result.error_kind)
    return _print_matches(args, result)


def _run_diff(args: Any, conf: Dict[str, Any]) -> int:
    result = compare_files(args.path_a, args.path_b)

    if args.json_output:
        payload = asdict(result)
        payload["message"] = result.message
        _print_json(payload)
    else:
        print(result.message)

    if result.status is DiffStatus.IDENTICAL:
        return EXIT_OK
    if result.status is DiffStatus.NOT_FOUND:
        return EXIT_INVALID
    return EXIT_NEGATIVE


def _run_ls(args: Any, conf: Dict[str, Any]) -> int:
    path = os.path.abspath(args.path)
    if not os.path.exists(path):
        return _report_error(args, i18n.t("cli.errors.path_not_exist", path=path), ErrorKind.NOT_FOUND)
    if not os.path.isdir(path):
        return _report_error(args, i18n.t("cli.errors.not_a_directory", path=path), ErrorKind.NOT_A_DIRECTORY)

    entries = list_directory(path, hidden=args.include_hidden)
    if args.json_output:
        _print_json([asdict(e) for e in entries])
        return EXIT_OK

    lines = format_listing(entries, detailed=args.detailed)
    if not lines:
        print(i18n.t("cli.status.empty_dir"))
    for line in lines:
        print(line)
    return EXIT_OK


def _run_hash(args: Any, conf: Dict[str, Any]) -> int:
    path = args.file
    if not os.path.exists(path):
        return _report_error(args, i18n.t("cli.errors.path_not_exist", path=path), ErrorKind.NOT_FOUND)
    if not os.path.isfile(path):
        return _report_error(args, i18n.t("cli.errors.not_a_file", path=path), ErrorKind.INVALID_ARGUMENT)

    algorithm = conf["hash_algorithm"]
    try:
        digest = file_checksum(path, algorithm)
    except (OSError, ValueError) as e:
        return _report_error(args, i18n.t("cli.errors.hash_failed", path=path, error=e), ErrorKind.OTHER)

    if args.json_output:
        _print_json({"path": os.path.abspath(path), "algorithm": algorithm, "digest": digest})
    else:
        print(f"{digest}  {path}")
    return EXIT_OK


def _run_cache(args: Any, conf: Dict[str, Any]) -> int:
    toolkit = ExplorerToolkit.from_config(conf)
    stats = toolkit.stats()

    if args.json_output:
        payload = asdict(stats)
        if args.list_entries:
            payload["directories"] = list(toolkit.entries())
        _print_json(payload)
        return EXIT_OK

    print(i18n.t(
        "cli.status.cache_summary",
        entries=stats.entries,
        roots=len(stats.roots),
        elapsed=stats.elapsed,
    ))
    if stats.truncated:
        print(i18n.t("cli.status.cache_truncated", capacity=stats.capacity))
    if stats.skipped:
        print(i18n.t("cli.status.skipped", count=len(stats.skipped)))
    if args.list_entries:
        for entry in toolkit.entries():
            print(entry)
    return EXIT_OK


def _run_cp(args: Any, conf: Dict[str, Any]) -> int:
    return _run_file_operation(args, "cp", copy_path(args.source, args.destination), args.source)


def _run_mv(args: Any, conf: Dict[str, Any]) -> int:
    return _run_file_operation(args, "mv", move_path(args.source, args.destination), args.source)


def _run_mkdir(args: Any, conf: Dict[str, Any]) -> int:
    return _run_file_operation(args, "mkdir", make_directory(args.path, parents=args.parents), None)


def _run_file_operation(args: Any, operation: str, outcome: Tuple[bool, Optional[str]], source: Optional[str]) -> int:
    """Render the (success, error) outcome of a filesystem operation."""
    success, error = outcome
    if args.json_output:
        _print_json({"operation": operation, "ok": success, "error": error})

    if success:
        logger.debug(f"{operation} completed")
        return EXIT_OK
    if source is not None and not os.path.lexists(source):
        return _report_error(args, i18n.t("cli.errors.path_not_exist", path=source), ErrorKind.NOT_FOUND)
    return _report_error(args, i18n.t("cli.errors.operation_failed", operation=operation, error=error), ErrorKind.OTHER)


_COMMANDS: Dict[str, Callable[[Any, Dict[str, Any]], int]] = {
    "tree": _run_tree,
    "find": _run_find,
    "locate": _run_locate,
    "diff": _run_diff,
    "ls": _run_ls,
    "hash": _run_hash,
    "cache": _run_cache,
    "cp": _run_cp,
    "mv": _run_mv,
    "mkdir": _run_mkdir,
}

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys known to the configuration schema are merged.
    """
    out = dict(base)
    known = get_default_config().keys()
    for k, v in overrides.items():
        if k in known and v is not None:
            out[k] = v
    return out


def _check_numeric_args(args: Any) -> Optional[str]:
    """Return an error message for a command-line depth or capacity out of range."""
    depth = getattr(args, "max_depth", None)
    if depth is not None and depth < 0:
        return i18n.t("cli.errors.invalid_depth", value=depth)
    capacity = getattr(args, "capacity", None)
    if capacity is not None and capacity < 1:
        return i18n.t("cli.errors.invalid_capacity", value=capacity)
    return None

# -----------------------------------------------------------------------------
# OUTPUT HELPERS
# -----------------------------------------------------------------------------

def _print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _print_matches(args: Any, result: Any) -> int:
    if args.json_output:
        _print_json(asdict(result))
    elif result.matches:
        for match in result.matches:
            print(match)
    else:
        print(i18n.t("cli.status.no_matches"), file=sys.stderr)
    return EXIT_OK if result.matches else EXIT_NEGATIVE


def _report_error(args: Any, message: str, kind: Optional[ErrorKind]) -> int:
    """Log and print an error, returning the exit code for its kind."""
    logger.error(message)
    if not args.json_output:
        print(f"ERROR: {message}", file=sys.stderr)
    return EXIT_INVALID if kind in _INPUT_ERROR_KINDS else EXIT_NEGATIVE

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
