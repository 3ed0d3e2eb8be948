"""Get installed package version."""

from importlib.metadata import PackageNotFoundError, version

from .. import __version__


def get_package_version() -> str:
    """Version of the installed distribution, or the in-tree version when running from source."""
    try:
        return version("metsysd")
    except PackageNotFoundError:
        return __version__
