# hostinfo/runtime.py
"""
Facts about the running Python interpreter.
"""

import platform
import sys

import psutil


def version() -> str:
    """Interpreter version string. PyPy reports its own version, not the language's."""
    if is_pypy():
        return "%d.%d.%d" % sys.pypy_version_info[:3]
    return platform.python_version()


def is_64bit() -> bool:
    """
    True if the interpreter itself is a 64-bit build. A 32-bit Python on a
    64-bit machine returns False; see hostinfo.system.is_64bit for the machine.
    """
    return sys.maxsize > 2**32


def path() -> str:
    return sys.executable


def implementation() -> str:
    return platform.python_implementation()


def is_canonical() -> bool:
    return implementation() == "CPython"


def is_pypy() -> bool:
    return implementation() == "PyPy"


def memory_usage() -> int:
    """Resident memory of this process in bytes."""
    return psutil.Process().memory_info().rss
