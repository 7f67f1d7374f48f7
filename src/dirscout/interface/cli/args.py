from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global flags plus one sub-command per
exploration or file operation) and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from dirscout.domain.constants import HASH_ALGORITHMS
from dirscout.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirscout CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirscout",
        description=i18n.t("app.description"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))

    # --- Format Selection ---
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    _add_tree_command(sub)
    _add_find_command(sub)
    _add_locate_command(sub)
    _add_diff_command(sub)
    _add_ls_command(sub)
    _add_hash_command(sub)
    _add_cache_command(sub)
    _add_cp_command(sub)
    _add_mv_command(sub)
    _add_mkdir_command(sub)

    return p


def _add_tree_command(sub: Any) -> None:
    t = sub.add_parser("tree", help=i18n.t("cli.args.tree.help"))
    t.add_argument("path", nargs="?", default=".", help=i18n.t("cli.args.tree.path"))
    t.add_argument("-d", "--depth", dest="max_depth", type=int, default=None, help=i18n.t("cli.args.tree.depth"))
    t.add_argument("-a", "--hidden", dest="show_hidden", action="store_true", default=None,
                   help=i18n.t("cli.args.tree.hidden"))

    scope = t.add_mutually_exclusive_group()
    scope.add_argument("-f", "--files", dest="dirs_only", action="store_false", default=None,
                       help=i18n.t("cli.args.tree.files"))
    scope.add_argument("--dirs-only", dest="dirs_only", action="store_true", default=None,
                       help=i18n.t("cli.args.tree.dirs_only"))

    t.add_argument("--icons", dest="icons", action="store_true", default=None, help=i18n.t("cli.args.tree.icons"))
    t.add_argument("--tree-file", dest="tree_file", default=None, help=i18n.t("cli.args.tree.tree_file"))


def _add_find_command(sub: Any) -> None:
    f = sub.add_parser("find", help=i18n.t("cli.args.find.help"))
    f.add_argument("pattern", help=i18n.t("cli.args.find.pattern"))
    f.add_argument("-r", "--root", dest="search_root", default=".", help=i18n.t("cli.args.find.root"))
    f.add_argument("-a", "--hidden", dest="include_hidden", action="store_true", help=i18n.t("cli.args.find.hidden"))


def _add_locate_command(sub: Any) -> None:
    loc = sub.add_parser("locate", help=i18n.t("cli.args.locate.help"))
    loc.add_argument("filename", help=i18n.t("cli.args.locate.filename"))
    _add_cache_options(loc)


def _add_diff_command(sub: Any) -> None:
    d = sub.add_parser("diff", help=i18n.t("cli.args.diff.help"))
    d.add_argument("path_a", help=i18n.t("cli.args.diff.a"))
    d.add_argument("path_b", help=i18n.t("cli.args.diff.b"))


def _add_ls_command(sub: Any) -> None:
    ls = sub.add_parser("ls", help=i18n.t("cli.args.ls.help"))
    ls.add_argument("path", nargs="?", default=".", help=i18n.t("cli.args.ls.path"))
    ls.add_argument("-l", "--long", dest="detailed", action="store_true", help=i18n.t("cli.args.ls.long"))
    ls.add_argument("-a", "--all", dest="include_hidden", action="store_true", help=i18n.t("cli.args.ls.all"))


def _add_hash_command(sub: Any) -> None:
    h = sub.add_parser("hash", help=i18n.t("cli.args.hash.help"))
    h.add_argument("file", help=i18n.t("cli.args.hash.file"))
    h.add_argument(
        "--algorithm",
        dest="hash_algorithm",
        type=str.lower,
        choices=HASH_ALGORITHMS,
        default=None,
        help=i18n.t("cli.args.hash.algorithm"),
    )


def _add_cache_command(sub: Any) -> None:
    c = sub.add_parser("cache", help=i18n.t("cli.args.cache.help"))
    _add_cache_options(c)
    c.add_argument("--list", dest="list_entries", action="store_true", help=i18n.t("cli.args.cache.list"))


def _add_cp_command(sub: Any) -> None:
    cp = sub.add_parser("cp", help=i18n.t("cli.args.cp.help"))
    cp.add_argument("source", help=i18n.t("cli.args.cp.source"))
    cp.add_argument("destination", help=i18n.t("cli.args.cp.destination"))


def _add_mv_command(sub: Any) -> None:
    mv = sub.add_parser("mv", help=i18n.t("cli.args.mv.help"))
    mv.add_argument("source", help=i18n.t("cli.args.mv.source"))
    mv.add_argument("destination", help=i18n.t("cli.args.mv.destination"))


def _add_mkdir_command(sub: Any) -> None:
    mk = sub.add_parser("mkdir", help=i18n.t("cli.args.mkdir.help"))
    mk.add_argument("path", help=i18n.t("cli.args.mkdir.path"))
    mk.add_argument("--no-parents", dest="parents", action="store_false", help=i18n.t("cli.args.mkdir.no_parents"))


def _add_cache_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--root", dest="roots", action="append", default=None, help=i18n.t("cli.args.locate.root"))
    parser.add_argument("--capacity", dest="capacity", type=int, default=None,
                        help=i18n.t("cli.args.locate.capacity"))

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only options that were actually given are returned, so saved
    configuration values survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if getattr(args, "log_file", None):
        overrides["log_file"] = args.log_file

    # Tree rendering
    for key in ("max_depth", "show_hidden", "dirs_only", "icons"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value

    # Directory cache
    roots = getattr(args, "roots", None)
    if roots:
        overrides["roots"] = _split_csv(",".join(roots))
    capacity = getattr(args, "capacity", None)
    if capacity is not None:
        overrides["capacity"] = capacity

    # Checksums
    algorithm = getattr(args, "hash_algorithm", None)
    if algorithm:
        overrides["hash_algorithm"] = algorithm

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
