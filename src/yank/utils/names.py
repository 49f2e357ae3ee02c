"""Random branch names like 'brave-badger'."""

import importlib.resources
import random
from pathlib import Path
from typing import Optional

import yaml

from yank.constants import DEFAULT_NAME_WORDS

_words: Optional[dict[str, list[str]]] = None


def _load_words() -> dict[str, list[str]]:
    """Load bundled adjective and noun lists."""
    try:
        files = importlib.resources.files("yank")
        content = (files / "defaults" / "words.yaml").read_text()
        return yaml.safe_load(content)
    except (FileNotFoundError, TypeError):
        dev_path = Path(__file__).parent.parent / "defaults" / "words.yaml"
        if dev_path.exists():
            with open(dev_path) as f:
                return yaml.safe_load(f)
        raise FileNotFoundError("Could not find defaults/words.yaml")


def get_words() -> dict[str, list[str]]:
    """Get cached word lists (loads on first access)."""
    global _words
    if _words is None:
        _words = _load_words()
    return _words


def generate_branch_name(
    words: int = DEFAULT_NAME_WORDS,
    alliterative: bool = True,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate `words - 1` adjectives followed by a noun, hyphen-joined.

    With alliterative=True every word shares the noun's initial letter.
    """
    if words < 1:
        raise ValueError("words must be at least 1")
    rng = rng or random.SystemRandom()
    lists = get_words()
    adjectives, nouns = lists["adjectives"], lists["nouns"]

    if alliterative:
        initials = {a[0] for a in adjectives}
        nouns = [n for n in nouns if n[0] in initials]
        noun = rng.choice(nouns)
        adjectives = [a for a in adjectives if a[0] == noun[0]]
    else:
        noun = rng.choice(nouns)

    count = words - 1
    if count <= len(adjectives):
        picked = rng.sample(adjectives, count)
    else:
        picked = [rng.choice(adjectives) for _ in range(count)]
    return "-".join(picked + [noun])
