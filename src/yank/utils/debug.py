"""Debug output utilities."""

import json

from yank.models.state import YankRequest
from yank.ui.output import GRAY, MAGENTA, NC


def debug_log(request_or_debug: YankRequest | bool, label: str, data) -> None:
    """Print a labelled, pretty-printed dump if debug mode is enabled."""
    enabled = (
        request_or_debug.debug
        if isinstance(request_or_debug, YankRequest)
        else request_or_debug
    )
    if not enabled:
        return

    if isinstance(data, str):
        try:
            body = json.dumps(json.loads(data), indent=2)
        except json.JSONDecodeError:
            body = data
    else:
        body = json.dumps(data, indent=2, default=str)
    print(f"\r\033[K{MAGENTA}[debug]{NC} {label}")
    for line in body.splitlines():
        print(f"{GRAY}  {line}{NC}")
