"""git-yank: move commits from the current branch to another branch."""
