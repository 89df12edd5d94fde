# topmark:header:start
#
#   project      : EDNKit
#   file         : introspection.py
#   file_relpath : src/ednkit/utils/introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-friendly names for value shapes (classes and typing hints)."""

from __future__ import annotations

from inspect import getmodule


def format_shape(shape: object) -> str:
    """Return a readable name for a shape, used in error messages and logs.

    Classes are rendered as ``module.QualifiedName`` (builtins without the
    module prefix); typing hints such as ``list[Node]`` use their own ``repr``.

    Args:
        shape: A class or a typing hint.

    Returns:
        A string like ``"collections.deque"``, ``"int"`` or ``"list[tests.Node]"``.
    """
    if not isinstance(shape, type):
        return repr(shape)

    mod_name: str | None = getattr(shape, "__module__", None)
    call_name: str = getattr(shape, "__qualname__", None) or shape.__name__

    if not mod_name:
        mod = getmodule(shape)
        if mod is not None and getattr(mod, "__name__", None):
            mod_name = mod.__name__

    if not mod_name or mod_name == "builtins":
        return call_name
    return f"{mod_name}.{call_name}"
