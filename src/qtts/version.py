"""Version information for qtts.

Reads the VERSION file in the project root when running from a checkout,
with a fallback for installed distributions.
"""

from pathlib import Path

__version__ = "0.1.0"  # Fallback version
__license__ = "MIT"


def get_version() -> str:
    """Get the current version string.

    Returns:
        Version string (e.g., "0.1.0").
    """
    version_path = Path(__file__).parent.parent.parent / "VERSION"  # src/qtts -> root
    if version_path.exists():
        try:
            return version_path.read_text().strip()
        except OSError:
            pass

    return __version__
