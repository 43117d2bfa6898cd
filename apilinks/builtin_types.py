"""Built-in PHP type names and their link targets."""

PHP_MANUAL_URL = "https://www.php.net"

PHP_TYPES: tuple[str, ...] = (
    "callable",
    "array",
    "string",
    "boolean",
    "bool",
    "integer",
    "int",
    "float",
    "object",
    "resource",
    "null",
    "false",
    "true",
)

# Spellings collapsed to the page name used in the manual URL.
PHP_TYPE_ALIASES: dict[str, str] = {
    "true": "boolean",
    "false": "boolean",
    "bool": "boolean",
    "int": "integer",
}

PHP_TYPE_DISPLAY_ALIASES: dict[str, str] = {
    "bool": "boolean",
    "int": "integer",
}


def is_builtin_type(name: str) -> bool:
    """Check if name is one of the built-in primitive types."""
    return name in PHP_TYPES


def builtin_display_name(name: str, title: str | None = None) -> str:
    """Return the display text for a built-in type.

    A display alias always wins, so ``int`` reads ``integer`` even when a
    title was given.
    """
    if name in PHP_TYPE_DISPLAY_ALIASES:
        return PHP_TYPE_DISPLAY_ALIASES[name]
    return title if title is not None else name


def builtin_type_url(name: str) -> str:
    """Return the language reference URL for a built-in type."""
    canonical = PHP_TYPE_ALIASES.get(name, name)
    return f"{PHP_MANUAL_URL}/language.types.{canonical.lower()}"
