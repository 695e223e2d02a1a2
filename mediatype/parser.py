"""
Media type parser
#################

Tokenizes media type strings without folding case and without judging the
parameters beyond their syntax.

.. autofunction:: parse_media_type

.. autoclass:: ParsedMediaType

"""

import collections
import re

from .errors import MalformedMediaType

_BASE_RE = re.compile(
    r"\s*(?P<type>[^/\s]+)/(?P<subtype>[^/;\s]+)\s*(?=;|\Z)")

_PARAMETER_RE = re.compile(
    r';\s*(?P<name>[^=;]+?)\s*=\s*'
    r'(?:"(?P<quoted>[^"]*)"|(?P<value>[^;]*[^;\s]))')

ParsedMediaType = collections.namedtuple(
    "ParsedMediaType",
    ["type", "subtype", "suffix", "parameters"])
ParsedMediaType.__doc__ = """
The raw fields of a media type. *parameters* is the list of ``(name, value)``
tuples in the order they appeared, repetitions included. Either side of the
last ``+`` in the subtype may be empty; no defaults are applied here.
"""


def _split_suffix(subtype):
    # only the last "+" separates the suffix, earlier ones belong to the
    # subtype
    if "+" not in subtype:
        return subtype, None

    subtype, _, suffix = subtype.rpartition("+")
    return subtype, suffix


def _parse_parameters(text):
    parameters = []
    for match in _PARAMETER_RE.finditer(text):
        value = match.group("quoted")
        if value is None:
            value = match.group("value")
        parameters.append((match.group("name"), value))
    return parameters


def parse_media_type(text):
    """
    Split *text* into type, subtype, suffix and parameters and return them as
    :class:`ParsedMediaType`.

    Whitespace is allowed around ``;`` and ``=``, but not within the
    ``type/subtype`` segment. Parameter values may be quoted, in which case the
    quotes are stripped. Fragments which do not look like ``name=value`` are
    skipped.

    Raise :class:`~mediatype.errors.MalformedMediaType` if the
    ``type/subtype`` segment is malformed.
    """
    match = _BASE_RE.match(text)
    if match is None:
        raise MalformedMediaType(text)

    subtype, suffix = _split_suffix(match.group("subtype"))

    return ParsedMediaType(
        match.group("type"),
        subtype,
        suffix,
        _parse_parameters(text[match.end():]))
