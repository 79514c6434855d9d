"""Exceptions raised by the store."""


class DatabaseError(Exception):
    """Base class for every store error."""


class InvalidKey(DatabaseError, ValueError):
    """Key (or store name) is missing, empty, or not a string."""


class InvalidValue(DatabaseError, ValueError):
    """Value is missing, empty, or not usable for the operation."""


class NotAnObject(DatabaseError, TypeError):
    """A dotted-path write or unset hit a value that is not a mapping."""


class NotAnArray(DatabaseError, TypeError):
    """An array operation was used on a value that is not a list."""


class NotANumber(DatabaseError, TypeError):
    """An arithmetic operation was used on a non-numeric value."""


class NotFound(DatabaseError, KeyError):
    """Root key or backing file does not exist."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class CorruptStore(DatabaseError, ValueError):
    """Backing file does not hold a single JSON object."""
