# hostinfo/environment.py
"""
The process environment: variables, the current user and directory.
"""

import os
import re
from typing import Optional

from hostinfo.probes import env, uname
from hostinfo.utils.errors import HostInfoError

# $NAME (unix) or %NAME% (windows)
RE_VARIABLE = re.compile(r"\$(\w+)|%(\w+)%")

# windows usually sets USERNAME, unix LOGNAME and/or USER
USER_VARIABLES = ("USERNAME", "LOGNAME", "USER")


def has_variable(name: str) -> bool:
    return env.has(name)


def get_variable(name: str) -> Optional[str]:
    """Value of an environment variable, or None if it isn't set."""
    return env.get(name)


def set_variable(name: str, value: str) -> None:
    try:
        env.set(name, value)
    except (ValueError, OSError) as e:
        raise HostInfoError(f"failed to set environment variable {name!r}: {e}") from e


def unset_variable(name: str) -> None:
    env.unset(name)


def expand_variables(text: str) -> str:
    """
    Replace every $NAME and %NAME% in text with the variable's value.
    Unset variables expand to an empty string.
    """

    def replace(match):
        name = match.group(1) or match.group(2)
        return get_variable(name) or ""

    return RE_VARIABLE.sub(replace, text)


def user_name() -> Optional[str]:
    for name in USER_VARIABLES:
        if has_variable(name):
            return get_variable(name)
    return None


def device_name() -> str:
    return uname.hostname()


def processor() -> str:
    return uname.machine()


def current_directory() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        raise HostInfoError(f"failed to determine the current working directory: {e}") from e
