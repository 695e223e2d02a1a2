"""
Media type errors
#################

.. autoclass:: MediaTypeError

.. autoclass:: MalformedMediaType

.. autoclass:: RepeatedParameterError

"""

class MediaTypeError(ValueError):
    """
    Base class for all errors raised while parsing or constructing a
    :class:`~mediatype.mediatype.MediaType`.
    """


class MalformedMediaType(MediaTypeError):
    """
    The text passed to the parser does not have the structure
    ``type/subtype[+suffix][; name=value]*``. This covers whitespace inside the
    ``type/subtype`` segment, a missing ``/`` and more than one ``/``.

    .. attribute:: text

       The original text which failed to parse.
    """

    def __init__(self, text):
        super().__init__("malformed media type: {!r}".format(text))
        self.text = text


class RepeatedParameterError(MediaTypeError):
    """
    Two or more parameter names compare equal when case is ignored.

    .. attribute:: parameters

       The list of all offending names, in the order and spelling of their
       second (and later) occurences.
    """

    def __init__(self, parameters):
        self.parameters = list(parameters)
        super().__init__("repeated parameters: {}".format(
            ", ".join(map(repr, self.parameters))))


ParseError = MalformedMediaType
