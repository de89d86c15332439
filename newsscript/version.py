"""Version information and utilities."""

import os
from datetime import datetime, timezone

from . import __version__

GIT_SHA = os.getenv("GIT_SHA", "dev")
BUILT_AT = os.getenv("BUILT_AT") or datetime.now(timezone.utc).isoformat()


def version_payload() -> dict:
    """Return release, commit and build time of the running service.

    :return: Version information as a dictionary.
    """
    return {"release": __version__, "git": GIT_SHA, "builtAt": BUILT_AT}
