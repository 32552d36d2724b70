from . import conf as conf
from ._binding import Binding as Binding
from ._descriptors import ArrayType as ArrayType
from ._descriptors import ConcreteType as ConcreteType
from ._descriptors import ParameterizedType as ParameterizedType
from ._descriptors import TypeDescriptor as TypeDescriptor
from ._descriptors import declared_parameter_count as declared_parameter_count
from ._errors import ArityMismatchError as ArityMismatchError
from ._errors import ForeignFieldError as ForeignFieldError
from ._errors import TypeResolutionError as TypeResolutionError
from ._errors import UnsupportedTypeError as UnsupportedTypeError
from ._fields import FieldDefinition as FieldDefinition
from ._fields import declared_fields as declared_fields
from ._resolver import TypeResolver as TypeResolver

__version__ = "0.1.0"
