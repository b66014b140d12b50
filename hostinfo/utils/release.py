import logging
import re
from pathlib import Path
from typing import Dict, Optional

from hostinfo.utils.errors import ParseError

logger = logging.getLogger(__name__)

RE_VARIABLE = re.compile(r"^[ \t]*(\w+)[ \t]*=[ \t]*(.*?)[ \t]*\r?$", re.MULTILINE)
RE_RELEASE = re.compile(r"\d+(?:\.\d+)*")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_release_file(path) -> Dict[str, str]:
    """
    Parse a KEY=value release file (os-release, lsb-release, SuSE-release).

    Keys are lowercased, one pair of surrounding quotes is stripped from each
    value and the last occurrence of a key wins. Raises ParseError when the
    file can't be read or holds no KEY=value line at all; checking that the
    file exists is up to the caller.
    """
    path = Path(path)
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(path, str(e)) from e

    data = {}
    for key, value in RE_VARIABLE.findall(contents):
        data[key.lower()] = _unquote(value)

    if not data:
        raise ParseError(path)

    logger.debug("parsed %s → %d variables", path, len(data))
    return data


def first_release(text: str) -> Optional[str]:
    """Return the first dotted-numeric token in text, e.g. '20.04.1'."""
    match = RE_RELEASE.search(text)
    return match.group(0) if match else None
