"""The :mod:`typebind.conf` submodule contains markers for attaching configuration to
field annotations via [PEP 593](https://peps.python.org/pep-0593/) runtime annotations.

Markers can be subscripted, `Suppress[T]`, or passed to `Annotated[T, Suppress]`.
"""

from ._markers import Suppress

__all__ = ["Suppress"]
