"""Build information."""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dyndnsr53")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "dev"

COMMIT = os.environ.get("BUILD_COMMIT", "unknown")
BUILD_DATE = os.environ.get("BUILD_DATE", "unknown")


def version_text() -> str:
    """Return the multi-line version banner printed by ``dyndnsr53 version``."""
    return (
        f"dyndnsr53 version {__version__}\n"
        f"Commit: {COMMIT}\n"
        f"Built: {BUILD_DATE}"
    )
