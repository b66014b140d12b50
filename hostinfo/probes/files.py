"""
Filesystem probe for the fixed set of descriptor files hostinfo looks at.

Every path is absolute and is resolved against ``root`` so the same probes can
inspect a mounted image or a test fixture instead of the live system.
"""

import logging
import plistlib
from xml.parsers.expat import ExpatError
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve(path: str, root="/") -> Path:
    return Path(root) / path.lstrip("/")


def exists(path: str, root="/") -> bool:
    found = resolve(path, root).is_file()
    logger.debug("probe %s → %s", path, "found" if found else "missing")
    return found


def read_text(path: str, root="/") -> str:
    return resolve(path, root).read_text(encoding="utf-8", errors="replace")


def read_plist(path: str, root="/") -> dict:
    """
    Load a property list (XML or binary). Returns an empty dict when the file
    is missing or isn't a valid plist.
    """
    target = resolve(path, root)
    try:
        with target.open("rb") as f:
            data = plistlib.load(f)
    except (OSError, plistlib.InvalidFileException, ExpatError, ValueError) as e:
        logger.debug("plist %s unreadable → %s", target, e)
        return {}
    return data if isinstance(data, dict) else {}
