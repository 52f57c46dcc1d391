from .either import Either, Left, Right, json_default
from .errors import EitherError, AbstractInstantiationError, WrongVariantError, ValidationError
from .reads import Reads, number, string, boolean, nullable
from .logger import ConsoleLogger
