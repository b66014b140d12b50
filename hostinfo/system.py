# hostinfo/system.py
"""
Facts about the operating system and hardware of the host.
"""

import logging
from typing import Optional

import psutil

from hostinfo.probes import files, uname
from hostinfo.utils.osdetect import OSFamily, get_os, is_os

logger = logging.getLogger(__name__)

MACOS_VERSION_PLIST = "/System/Library/CoreServices/SystemVersion.plist"

ARCH_64 = {
    "x86_64", "amd64", "x64", "aarch64", "arm64", "ia64",
    "ppc64", "ppc64le", "s390x", "sparc64", "mips64", "riscv64", "loongarch64",
}


def kernel_name() -> str:
    return uname.system()


def kernel_release() -> str:
    return uname.release()


def kernel_version() -> str:
    return uname.version()


def architecture() -> str:
    return uname.machine()


def hostname() -> str:
    return uname.hostname()


def macos_version(root="/") -> str:
    """ProductVersion from SystemVersion.plist, '' if it can't be read."""
    return str(files.read_plist(MACOS_VERSION_PLIST, root).get("ProductVersion", ""))


def version(root="/", system=None) -> str:
    """
    Platform version. What this means depends on the platform: the macOS
    product version on Darwin, the kernel release on Linux, and whatever the
    kernel reports as its version everywhere else.
    """
    family = get_os(system, root)
    if is_os(family, OSFamily.DARWIN):
        return macos_version(root)
    if is_os(family, OSFamily.LINUX):
        return kernel_release()
    return kernel_version()


def is_64bit() -> bool:
    """True if the machine architecture is a 64-bit one."""
    machine = architecture().lower()
    return machine in ARCH_64 or machine.endswith("64")


def cpu_count(logical: bool = True) -> Optional[int]:
    return psutil.cpu_count(logical=logical)


def total_memory() -> int:
    """Total physical memory in bytes, -1 if it can't be determined."""
    try:
        return psutil.virtual_memory().total
    except (OSError, RuntimeError, NotImplementedError) as e:
        logger.debug("virtual_memory failed → %s", e)
        return -1


def available_memory() -> int:
    """Memory available to new processes in bytes, -1 if unknown."""
    try:
        return psutil.virtual_memory().available
    except (OSError, RuntimeError, NotImplementedError) as e:
        logger.debug("virtual_memory failed → %s", e)
        return -1
