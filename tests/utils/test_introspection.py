# topmark:header:start
#
#   project      : EDNKit
#   file         : test_introspection.py
#   file_relpath : tests/utils/test_introspection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `ednkit.utils.introspection.format_shape`."""

from __future__ import annotations

from collections import deque

from ednkit.types import KMap
from ednkit.utils.introspection import format_shape


class Local:
    """Class defined in a test module."""


def test_builtins_have_no_module_prefix() -> None:
    """Builtin classes use their bare name."""
    assert format_shape(int) == "int"
    assert format_shape(type(None)) == "NoneType"


def test_classes_are_module_qualified() -> None:
    """Other classes are ``module.QualifiedName``."""
    assert format_shape(deque) == "collections.deque"
    assert format_shape(KMap) == "ednkit.types.KMap"
    assert format_shape(Local).endswith("test_introspection.Local")


def test_hints_use_their_repr() -> None:
    """Typing hints render as written."""
    assert format_shape(list[int]) == "list[int]"
    assert format_shape(dict[str, int]) == "dict[str, int]"
