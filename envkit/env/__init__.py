"""Environment accessors bound to the process environment.

The module-level functions read ``os.environ`` at call time. Use
``EnvAccessor`` directly to read from any other mapping, e.g. in tests.
"""

from __future__ import annotations

from ..config.env import DEFAULT_ARRAY_SEPARATOR
from .accessor import EnvAccessor

_process_env = EnvAccessor()


def get(name: str) -> str:
    return _process_env.get(name)


def must_get(name: str) -> str:
    return _process_env.must_get(name)


def exists(name: str) -> bool:
    return _process_env.exists(name)


def get_or(name: str, default: str) -> str:
    return _process_env.get_or(name, default)


def get_bool_or(name: str, default: bool) -> bool:
    return _process_env.get_bool_or(name, default)


def get_uint_or(name: str, default: int) -> int:
    return _process_env.get_uint_or(name, default)


def get_array(
    name: str,
    sep: str = DEFAULT_ARRAY_SEPARATOR,
    allow_quotes: bool = False,
    trim_quoted: bool = False,
) -> list[str]:
    return _process_env.get_array(name, sep, allow_quotes, trim_quoted)


def must_get_array(
    name: str,
    sep: str = DEFAULT_ARRAY_SEPARATOR,
    allow_quotes: bool = False,
    trim_quoted: bool = False,
) -> list[str]:
    return _process_env.must_get_array(name, sep, allow_quotes, trim_quoted)


__all__ = [
    "EnvAccessor",
    "get",
    "must_get",
    "exists",
    "get_or",
    "get_bool_or",
    "get_uint_or",
    "get_array",
    "must_get_array",
]
