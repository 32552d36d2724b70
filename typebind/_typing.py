# Type annotations handled here may be "regular" classes like `int` and `str`, or more
# general forms like `List[T]`, `Tuple[T, ...]`, or `Annotated[str, ...]`.
#
# A precise annotation for these would need typing.TypeForm (PEP 747). Until that's
# widely supported we use Type[T] everywhere we would otherwise have TypeForm[T].

from typing import Type as TypeForm

__all__ = ["TypeForm"]
