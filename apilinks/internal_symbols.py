"""Classes and interfaces shipped with the PHP runtime itself."""

from collections.abc import Iterable

from apilinks.builtin_types import PHP_MANUAL_URL
from apilinks.entity import NAMESPACE_SEPARATOR

PHP_INTERNAL_CLASSES: tuple[str, ...] = (
    "ArgumentCountError",
    "ArithmeticError",
    "ArrayAccess",
    "ArrayIterator",
    "ArrayObject",
    "BackedEnum",
    "BadFunctionCallException",
    "BadMethodCallException",
    "Closure",
    "Countable",
    "DateInterval",
    "DatePeriod",
    "DateTime",
    "DateTimeImmutable",
    "DateTimeInterface",
    "DateTimeZone",
    "DivisionByZeroError",
    "DomainException",
    "Error",
    "ErrorException",
    "Exception",
    "Generator",
    "InvalidArgumentException",
    "Iterator",
    "IteratorAggregate",
    "JsonSerializable",
    "LengthException",
    "LogicException",
    "OutOfBoundsException",
    "OutOfRangeException",
    "OverflowException",
    "PDO",
    "PDOException",
    "PDOStatement",
    "RangeException",
    "RuntimeException",
    "Serializable",
    "SplFileInfo",
    "SplFixedArray",
    "SplObjectStorage",
    "SplObserver",
    "SplQueue",
    "SplStack",
    "SplSubject",
    "stdClass",
    "Stringable",
    "Throwable",
    "Traversable",
    "TypeError",
    "UnderflowException",
    "UnexpectedValueException",
    "UnitEnum",
    "ValueError",
    "WeakMap",
    "WeakReference",
)


class InternalSymbols:
    """Answers whether a name is a runtime class rather than a documented one."""

    def __init__(self, extra: Iterable[str] | None = None) -> None:
        """Initialize with the default runtime classes plus any extra names."""
        names = [*PHP_INTERNAL_CLASSES, *(extra or [])]
        # PHP class names are case-insensitive.
        self.names = {self.doc_path(n) for n in names}

    def is_internal(self, name: str) -> bool:
        """Check if name is provided by the runtime."""
        return bool(name) and self.doc_path(name) in self.names

    @staticmethod
    def doc_path(name: str) -> str:
        """Return the lower-cased path component used by the PHP manual."""
        return name.lstrip(NAMESPACE_SEPARATOR).lower()

    def doc_url(self, name: str) -> str:
        """Return the PHP manual URL for a runtime class."""
        return f"{PHP_MANUAL_URL}/class.{self.doc_path(name)}"
