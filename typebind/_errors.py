"""Exceptions raised while binding and resolving types."""


class TypeResolutionError(Exception):
    """Base class for errors raised by :mod:`typebind`.

    None of these are transient: they point at a mistake in how a class is declared
    or how a resolver is being used, so callers should propagate them."""


class ArityMismatchError(TypeResolutionError, ValueError):
    """Raised when the number of type arguments doesn't match the number of type
    parameters declared by a class."""


class ForeignFieldError(TypeResolutionError, ValueError):
    """Raised when a resolver is asked about a field that isn't declared on its
    class."""


class UnsupportedTypeError(TypeResolutionError, TypeError):
    """Raised when a type annotation can't be described structurally. This includes
    wildcard-like annotations: `Any`, unions, and unbound type variables."""
