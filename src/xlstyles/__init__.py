"""Cell style tables and cascading cell formats for spreadsheets."""

import importlib.metadata
import warnings

with warnings.catch_warnings():
    # Protobuf
    warnings.filterwarnings("ignore", category=DeprecationWarning)
    from xlstyles.cell import *  # noqa: F403
    from xlstyles.constants import *  # noqa: F403
    from xlstyles.document import *  # noqa: F403
    from xlstyles.exceptions import *  # noqa: F403
    from xlstyles.ranges import *  # noqa: F403
    from xlstyles.resolver import *  # noqa: F403
    from xlstyles.styles import *  # noqa: F403
    from xlstyles.table import *  # noqa: F403
    from xlstyles.worksheet import *  # noqa: F403
    from xlstyles.xrefs import *  # noqa: F403

__version__ = importlib.metadata.version("xlstyles")


def _get_version() -> str:
    return __version__
