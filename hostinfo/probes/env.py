import os
from typing import Optional


def has(name: str) -> bool:
    return name in os.environ


def get(name: str) -> Optional[str]:
    return os.environ.get(name)


def set(name: str, value: str) -> None:
    os.environ[name] = str(value)


def unset(name: str) -> None:
    os.environ.pop(name, None)
