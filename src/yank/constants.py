"""Constants for the yank run."""

# Process exit codes (argparse itself exits 2 on bad usage)
EXIT_OK = 0
EXIT_FAILED = 1  # A fatal step aborted the run
EXIT_WARNINGS = 3  # Finished, but some recoverable steps failed

DEFAULT_START_POINT = "master"
DEFAULT_NAME_WORDS = 2

# Values accepted for rebase.merges in config
REBASE_MERGE_FLAGS = {
    "rebase-merges": "--rebase-merges",
    "preserve-merges": "--preserve-merges",  # Removed in git 2.34
    "none": None,
}
DEFAULT_REBASE_MERGES = "rebase-merges"

STASH_MESSAGE = "git-yank: autostash"
