from __future__ import annotations
from typing import Any

from .errors import AbstractInstantiationError


def abstract_class_check(instance: Any, abstract_cls: type, name: str) -> None:
    """Fail when ``instance`` was built from ``abstract_cls`` itself rather than a subclass."""
    if type(instance) is abstract_cls:
        raise AbstractInstantiationError(name)
