"""semtag's own version.

Installed copies read it from the package metadata. A source checkout that
was never installed asks git about the checkout semtag itself lives in, never
about the repository semtag is pointed at.
"""

import os
import subprocess
from importlib.metadata import version, PackageNotFoundError

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def get_version() -> str:
    try:
        return version("semtag")
    except PackageNotFoundError:
        return _describe_source_checkout()


def _describe_source_checkout() -> str:
    """Return `git describe` of the semtag checkout, or "unknown"."""
    try:
        result = subprocess.run(
            ["git", "describe", "--tags", "--dirty", "--always"],
            cwd=PACKAGE_DIR,
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"
    return result.stdout.strip() or "unknown"


__version__ = get_version()
