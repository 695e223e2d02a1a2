"""
Media type parsing, formatting and matching
###########################################

.. automodule:: mediatype.mediatype

.. automodule:: mediatype.parameters

.. automodule:: mediatype.parser

.. automodule:: mediatype.accept

.. automodule:: mediatype.errors

"""

from .errors import (
    MediaTypeError,
    MalformedMediaType,
    ParseError,
    RepeatedParameterError)
from .mediatype import MediaType, RegistrationTree
from .parameters import ParameterMap

__all__ = [
    "MediaType",
    "RegistrationTree",
    "ParameterMap",
    "MediaTypeError",
    "MalformedMediaType",
    "ParseError",
    "RepeatedParameterError",
]
