"""CLI entry point and argument parsing."""

import argparse
import shutil
import sys
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Optional

try:
    __version__ = get_version("git-yank")
except Exception:
    __version__ = "dev"

from yank.config import ConfigError, get_config, get_config_loaded_sources, get_path
from yank.constants import (
    DEFAULT_NAME_WORDS,
    DEFAULT_REBASE_MERGES,
    DEFAULT_START_POINT,
    EXIT_FAILED,
    EXIT_OK,
)
from yank.models.state import YankRequest
from yank.phases.yank import run_yank
from yank.ui.output import NC, YELLOW, error, log, warn
from yank.utils.names import generate_branch_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-yank",
        description="Move a commit or series of commits to a new branch.",
        usage="%(prog)s [commits] <options>",
        epilog="""
Examples:
  %(prog)s <sha1> <sha2> <sha3>
      Moves the three specified commits to a new destination branch.
  %(prog)s <sha> -b hotfix
      Moves the specified commit to the destination branch "hotfix",
      creating it if it doesn't exist.
  %(prog)s <sha> --branch feature/patch --start-point feature
      Moves the specified commit to the destination branch "feature/patch",
      creating it from the "feature" branch if it doesn't exist.

How it works:
  1. Records the current (source) branch
  2. Stashes uncommitted changes to tracked files (unless --no-stash)
  3. Creates the destination branch from the start point, or reuses it
  4. Cherry-picks the commits onto it, in the order given
  5. Pushes the destination branch (with --push)
  6. Returns to the source branch
  7. Rebases the commits out of the source branch (unless --safe),
     newest first so the ids of older commits stay valid
  8. Restores stashed changes

  A failed checkout or cherry-pick stops the run: the source branch is
  checked out again and stashed changes are restored.

Config:
  Defaults live in ~/.config/git-yank/config.yaml and .git-yank/config.yaml
  (start_point, stash, push.remote, rebase.merges, branch_name.words,
  branch_name.alliterative). Command-line flags win.

Exit codes:
  0  success (or nothing to do)
  1  a step failed and the run was rolled back
  3  finished, but some steps reported warnings
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "commits",
        metavar="COMMIT",
        nargs="*",
        help="Commit(s) to move, in the order they should be replayed",
    )
    parser.add_argument(
        "-b",
        "--branch",
        metavar="NAME",
        help="Destination branch to create or use. If not specified, a unique name is generated.",
    )
    parser.add_argument(
        "-s",
        "--start-point",
        metavar="REF",
        help=f"Where a new destination branch starts (default: {DEFAULT_START_POINT})",
    )
    parser.add_argument(
        "-p",
        "--push",
        action="store_true",
        help="Push the destination branch once the commits are replayed",
    )
    parser.add_argument(
        "-S",
        "--safe",
        action="store_true",
        help="Preserve the commits on the source branch",
    )
    parser.add_argument(
        "--no-stash",
        action="store_true",
        help="Do not stash uncommitted changes before moving commits",
    )
    parser.add_argument(
        "-C",
        dest="cwd",
        metavar="PATH",
        default=".",
        help="Run as if started in PATH",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the source branch, resolved options and every git command",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def resolve_request(args: argparse.Namespace, config: dict) -> YankRequest:
    """Fill in config defaults and a generated branch name, then freeze."""
    destination = args.branch or generate_branch_name(
        words=int(get_path(config, "branch_name.words", DEFAULT_NAME_WORDS)),
        alliterative=bool(get_path(config, "branch_name.alliterative", True)),
    )
    return YankRequest(
        commits=tuple(args.commits),
        destination_branch=destination,
        start_point=args.start_point or get_path(config, "start_point", DEFAULT_START_POINT),
        push=args.push,
        safe=args.safe,
        debug=args.debug,
        stash=bool(get_path(config, "stash", True)) and not args.no_stash,
        cwd=args.cwd,
        remote=get_path(config, "push.remote"),
        rebase_merges=get_path(config, "rebase.merges", DEFAULT_REBASE_MERGES),
    )


def log_config(request: YankRequest) -> None:
    """Log what is about to happen."""
    count = len(request.commits)
    log(
        f"Moving {count} commit{'s' if count != 1 else ''} to "
        f"{YELLOW}{request.destination_branch}{NC} (start point: {request.start_point})"
    )

    overrides = [s for s in get_config_loaded_sources() if s != "defaults"]
    if overrides:
        log(f"Config overrides: {', '.join(overrides)}")

    if request.safe:
        log("Safe mode: commits stay on the source branch")
    else:
        warn("Commits will be removed from the source branch (use --safe to keep them)")
    if request.push:
        log(f"Push enabled ({request.remote or 'upstream'})")
    if not request.stash:
        log("Stash disabled")


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.commits:
        parser.print_help()
        sys.exit(EXIT_OK)

    if not shutil.which("git"):
        error("git-yank requires git on PATH")
        sys.exit(EXIT_FAILED)

    if not Path(args.cwd).is_dir():
        error(f"Cannot run in '{args.cwd}': not a directory")
        sys.exit(EXIT_FAILED)

    try:
        config = get_config(args.cwd)
        request = resolve_request(args, config)
    except (ConfigError, ValueError) as e:
        error(str(e))
        sys.exit(EXIT_FAILED)

    log_config(request)
    result = run_yank(request)
    sys.exit(result.exit_code)
