"""
Platform accessor: raw uname-style strings for the running host.
"""

import platform
import socket


def system() -> str:
    """Kernel name, e.g. 'Linux', 'Darwin', 'Windows'."""
    return platform.system()


def release() -> str:
    return platform.release()


def version() -> str:
    return platform.version()


def machine() -> str:
    """Machine / architecture string, e.g. 'x86_64' or 'arm64'."""
    return platform.machine()


def hostname() -> str:
    return socket.gethostname()
