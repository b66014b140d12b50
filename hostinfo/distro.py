# hostinfo/distro.py
"""
Linux distribution detection.

Descriptor files are probed in a fixed priority order and the first one that
exists decides the result, even when its contents turn out to be unusable.
Nothing is cached: every call re-reads the files, so the functions here are
stateless and safe to call from any thread.
"""

import logging
import re
from collections.abc import Mapping

from hostinfo.probes import files
from hostinfo.utils.errors import ParseError
from hostinfo.utils.osdetect import OSFamily, get_os, is_os
from hostinfo.utils.release import first_release, parse_release_file

logger = logging.getLogger(__name__)

FIELDS = ("name", "release", "codename", "pretty_name")

RE_CODENAME = re.compile(r"\(([^)]+)\)\s*$")
RE_ISSUE_ESCAPE = re.compile(r"\\.")


class DistributionInfo(Mapping):
    """
    Read-only mapping of what is known about the distribution.

    Only the keys name, release, codename and pretty_name can appear, and a
    key is left out entirely when it couldn't be determined.
    """

    __slots__ = ("_data",)

    def __init__(self, **fields):
        unknown = set(fields) - set(FIELDS)
        if unknown:
            raise KeyError(f"unknown distribution fields: {sorted(unknown)}")
        self._data = {k: v for k, v in fields.items() if v}

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"DistributionInfo({self._data!r})"

    @property
    def name(self):
        return self._data.get("name")

    @property
    def release(self):
        return self._data.get("release")

    @property
    def codename(self):
        return self._data.get("codename")

    @property
    def pretty_name(self):
        return self._data.get("pretty_name")


def _first_line(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _from_lsb(path, root):
    release = parse_release_file(files.resolve(path, root))
    return {
        "name": release.get("distrib_id", "").lower(),
        "release": release.get("distrib_release"),
        "codename": release.get("distrib_codename"),
        "pretty_name": release.get("distrib_description"),
    }


def _from_os_release(path, root):
    # http://www.freedesktop.org/software/systemd/man/os-release.html
    release = parse_release_file(files.resolve(path, root))
    return {
        "name": release.get("id"),
        "release": release.get("version_id"),
        "codename": release.get("version_codename"),
        "pretty_name": release.get("pretty_name"),
    }


def _from_suse(path, root):
    release = parse_release_file(files.resolve(path, root))
    version = release.get("version")
    if version and release.get("patchlevel"):
        version = f"{version}.{release['patchlevel']}"
    return {
        "name": "suse",
        "release": version,
        "pretty_name": _first_line(files.read_text(path, root)),
    }


def _free_text(name):
    """Reader for one-line descriptors like 'CentOS release 6.5 (Final)'."""

    def reader(path, root):
        line = _first_line(files.read_text(path, root))
        codename = RE_CODENAME.search(line)
        return {
            "name": name,
            "release": first_release(line),
            "codename": codename.group(1).strip() if codename else None,
            "pretty_name": line,
        }

    return reader


def _presence(name):
    def reader(path, root):
        return {"name": name}

    return reader


def parse_issue(text: str) -> dict:
    """
    Best-effort guess from /etc/issue, e.g. 'Ubuntu 20.04.1 LTS \\n \\l'.
    """
    line = _first_line(RE_ISSUE_ESCAPE.sub("", text))
    if not line:
        return {}
    release = first_release(line)
    prefix = line.split(release, 1)[0] if release else line
    prefix = re.sub(r"^welcome to\s+", "", prefix.strip(), flags=re.IGNORECASE)
    words = prefix.split()
    return {
        "name": words[0].lower() if words else None,
        "release": release,
        "pretty_name": line,
    }


def _from_issue(path, root):
    return parse_issue(files.read_text(path, root))


# Highest priority first. debian_version sits near the end because Debian
# derivatives ship it as well.
DESCRIPTORS = (
    ("/etc/lsb-release", _from_lsb),
    ("/etc/os-release", _from_os_release),
    ("/etc/SuSE-release", _from_suse),
    ("/etc/fedora-release", _free_text("fedora")),
    ("/etc/mandrake-release", _free_text("mandrake")),
    ("/etc/centos-release", _free_text("centos")),
    ("/etc/gentoo-release", _presence("gentoo")),
    ("/etc/slackware-version", _free_text("slackware")),
    ("/etc/redhat-release", _free_text("redhat")),
    ("/etc/debian_version", _free_text("debian")),
    ("/etc/issue", _from_issue),
)


def detect_linux_distribution(root="/", system=None) -> DistributionInfo:
    """
    Identify the Linux distribution from its descriptor files.

    Returns an empty DistributionInfo when the system isn't Linux, when no
    descriptor exists, or when the first descriptor found can't be parsed.
    """
    if not is_os(get_os(system, root), OSFamily.LINUX):
        return DistributionInfo()

    for path, reader in DESCRIPTORS:
        if not files.exists(path, root):
            continue
        try:
            fields = reader(path, root)
        except (ParseError, OSError) as e:
            logger.warning("ignoring %s → %s", path, e)
            return DistributionInfo()
        logger.debug("distribution from %s → %s", path, fields)
        return DistributionInfo(**fields)

    logger.debug("no distribution descriptor found under %s", root)
    return DistributionInfo()
