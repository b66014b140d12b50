import enum
import logging

from hostinfo.probes import files, uname

logger = logging.getLogger(__name__)

# present on every Linux kernel, whatever uname claims (WSL, odd containers)
LINUX_MARKER = "/proc/version"


class OSFamily(enum.IntEnum):
    """
    Operating system family as a bitmask.

    Each Unix-like family carries the UNIX bit plus one bit of its own, so
    ``family & UNIX == UNIX`` answers "is this a Unix?" for all of them.
    WINDOWS shares no bit with UNIX.
    """

    UNKNOWN = 0
    UNIX = 0b1
    WINDOWS = 0b10
    LINUX = 0b101
    DARWIN = 0b1001
    FREEBSD = 0b10001
    SOLARIS = 0b100001
    HP_UX = 0b1000001
    AIX = 0b10000001


_EXACT = {
    "linux": OSFamily.LINUX,
    "freebsd": OSFamily.FREEBSD,
    "sunos": OSFamily.SOLARIS,
    "solaris": OSFamily.SOLARIS,
    "darwin": OSFamily.DARWIN,
    "hp-ux": OSFamily.HP_UX,
    "aix": OSFamily.AIX,
    "unix": OSFamily.UNIX,
}
_WINDOWS_PREFIXES = ("win", "cygwin")


def classify(kernel_name: str) -> OSFamily:
    """Map a kernel name (as reported by uname -s) to its OSFamily."""
    name = (kernel_name or "").strip().lower()
    if name in _EXACT:
        return _EXACT[name]
    if name.startswith(_WINDOWS_PREFIXES):
        return OSFamily.WINDOWS
    return OSFamily.UNKNOWN


def is_os(current, *candidates) -> bool:
    """
    True if ``current`` is any of ``candidates`` or a derivative of one,
    e.g. ``is_os(OSFamily.FREEBSD, OSFamily.UNIX)``.
    """
    for candidate in candidates:
        if candidate == OSFamily.UNKNOWN:
            if current == OSFamily.UNKNOWN:
                return True
        elif current & candidate == candidate:
            return True
    return False


def get_os(system=None, root="/") -> OSFamily:
    """
    Detect the family of the running system. The Linux marker file is checked
    before the kernel name; pass ``system`` to classify a given kernel name
    instead of the live one.
    """
    if files.exists(LINUX_MARKER, root):
        return OSFamily.LINUX
    if system is None:
        system = uname.system()
    family = classify(system)
    logger.debug("kernel name %r → %s", system, family.name)
    return family
