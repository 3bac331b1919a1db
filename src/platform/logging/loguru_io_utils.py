from enum import Enum
from inspect import getfile, getsourcelines
from os.path import basename
from time import time
from types import MappingProxyType
from typing import Any, Callable

import attrs

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io_config import call_depth_var, chain_start_time_var


_PLAIN_TYPES = (type(None), bool, int, float, str, bytes, type)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def describe_content(data: Any) -> str:
    """Render a value for logging without calling any method the value defines.

    Exact builtin types, containers of them, enum members and attrs instances
    are rendered by structure; anything else only by its type name.
    """
    data_type = type(data)
    if any(data_type is plain_type for plain_type in _PLAIN_TYPES):
        return repr(data)
    if data_type is list:
        return f'[{", ".join(describe_content(item) for item in data)}]'
    if data_type is tuple:
        items = [describe_content(item) for item in data]
        return f'({items[0]},)' if len(items) == 1 else f'({", ".join(items)})'
    if data_type is dict or data_type is MappingProxyType:
        items = ', '.join(
            f'{describe_content(key)}: {describe_content(value)}' for key, value in data.items()
        )
        return f'{{{items}}}'
    if issubclass(data_type, Enum):
        return f'{data_type.__name__}.{object.__getattribute__(data, "_name_")}'
    if attrs.has(data_type):
        fields = ', '.join(
            f'{field.name}={describe_content(object.__getattribute__(data, field.name))}'
            for field in attrs.fields(data_type)
        )
        return f'{data_type.__name__}({fields})'
    return f'<{data_type.__name__}>'


def truncate_content(data_str: str, max_length: int | None = None) -> str:
    limit = max_length or settings.LOG_TRUNCATE_LENGTH
    if len(data_str) <= limit:
        return data_str
    return f'{data_str[:limit]}... (truncated {len(data_str) - limit} chars)'
