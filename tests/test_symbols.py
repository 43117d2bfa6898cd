"""Tests for built-in type tables and runtime class detection."""

from apilinks.builtin_types import (
    builtin_display_name,
    builtin_type_url,
    is_builtin_type,
)
from apilinks.internal_symbols import InternalSymbols


def test_builtin_types() -> None:
    """Verify membership, display names and canonical URLs."""
    assert is_builtin_type("int")
    assert is_builtin_type("callable")
    assert not is_builtin_type("mixed")
    assert not is_builtin_type("\\int")
    assert builtin_display_name("bool") == "boolean"
    assert builtin_display_name("false") == "false"
    assert builtin_display_name("int", "Count") == "integer"
    assert builtin_display_name("null", "nothing") == "nothing"
    assert builtin_type_url("false") == "https://www.php.net/language.types.boolean"
    assert builtin_type_url("float") == "https://www.php.net/language.types.float"


def test_internal_symbols_case_insensitive() -> None:
    """Verify that runtime class names match regardless of case or root marker."""
    symbols = InternalSymbols()
    assert symbols.is_internal("Exception")
    assert symbols.is_internal("\\arrayaccess")
    assert not symbols.is_internal("app\\Exception")
    assert not symbols.is_internal("")
    assert symbols.doc_url("\\IteratorAggregate") == (
        "https://www.php.net/class.iteratoraggregate"
    )


def test_internal_symbols_extra() -> None:
    """Verify that extra runtime classes can be registered."""
    symbols = InternalSymbols(["Redis"])
    assert symbols.is_internal("Redis")
    assert not InternalSymbols().is_internal("Redis")
