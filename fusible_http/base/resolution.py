"""Implementation reference resolution.

Purpose
-------
Turn an implementation reference (a class, or a dotted string naming one)
into a class object, and check whether that class declares a contract.
Modules are imported lazily using ``importlib`` so that naming an
implementation has no import-time cost until a provider is built.

Accepted string forms
---------------------
- ``"package.module:ClassName"`` (preferred; nested classes via dots after ``:``)
- ``"package.module.ClassName"``

Failure modes
-------------
- ``ImportError`` when the module cannot be imported.
- ``AttributeError`` when the module lacks the named attribute.
- ``TypeError`` when the reference does not name a class.

Callers translate these into domain errors; this module raises plain Python
exceptions only.
"""

from __future__ import annotations

import inspect
from importlib import import_module
from typing import Any, Type, Union

ImplementationRef = Union[str, type]


def describe(ref: ImplementationRef) -> str:
    """Return a printable name for ``ref``."""
    if isinstance(ref, type):
        return f"{ref.__module__}.{ref.__qualname__}"
    return str(ref)


def _split(path: str) -> tuple[str, str]:
    if ":" in path:
        module_path, _, attr_path = path.partition(":")
    else:
        module_path, _, attr_path = path.rpartition(".")
    if not module_path or not attr_path:
        raise ImportError(f"'{path}' is not a dotted class path")
    return module_path, attr_path


def load_class(ref: ImplementationRef) -> Type[Any]:
    """Resolve ``ref`` to a class object.

    Parameters
    ----------
    ref:
        A class, or a dotted path string naming one.

    Returns
    -------
    type
        The referenced class.
    """
    if isinstance(ref, type):
        return ref
    if not isinstance(ref, str):
        raise TypeError(f"implementation reference must be a class or a string, got {type(ref).__name__}")

    module_path, attr_path = _split(ref.strip())
    target: Any = import_module(module_path)
    for part in attr_path.split("."):
        target = getattr(target, part)
    if not inspect.isclass(target):
        raise TypeError(f"'{ref}' does not name a class")
    return target


def declares_contract(cls: type, contract: type) -> bool:
    """Return True when ``contract`` is among the declared bases of ``cls``.

    The whole MRO is searched, so conformance inherited from a parent class
    counts. Nothing on ``cls`` is called; a class that declares a contract but
    implements it partially still passes.
    """
    return contract in inspect.getmro(cls)


__all__ = ["ImplementationRef", "describe", "load_class", "declares_contract"]
