"""Package version, from installed metadata or the repository VERSION file"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_VERSION_FILE = Path(__file__).resolve().parent.parent / 'VERSION'


def _get_version():
    try:
        return version('gridrefs')
    except PackageNotFoundError:
        pass

    # Source checkout without installed metadata
    if _VERSION_FILE.is_file():
        return _VERSION_FILE.read_text(encoding='utf-8').strip()

    return None


__version__ = _get_version()

__all__ = ['__version__']
