"""
Media type objects
##################

.. autoclass:: MediaType
   :members: from_parts, from_fields, parse, type, subtype, suffix, parameters,
             formatted, registration_tree, equals, matches, with_parameters

.. autoclass:: RegistrationTree

"""

import copy
import logging

from .errors import RepeatedParameterError
from .parameters import (
    ParameterMap,
    compare_parameters,
    unique_entries,
    iter_items)
from .parser import parse_media_type

logger = logging.getLogger(__name__)

class RegistrationTree:
    """
    Namespace for the registration trees of RFC 6838. These are the values
    :attr:`MediaType.registration_tree` returns for the known subtype
    prefixes.

    .. attribute:: standards

       Subtype without a facet, e.g. ``application/json``.

    .. attribute:: vendor

       ``vnd.`` prefix.

    .. attribute:: personal

       ``prs.`` prefix.

    .. attribute:: unregistered

       ``x.`` prefix.
    """

    __init__ = None

    standards = "standards"
    vendor = "vendor"
    personal = "personal"
    unregistered = "unregistered"

_TREE_PREFIXES = {
    "vnd": RegistrationTree.vendor,
    "prs": RegistrationTree.personal,
    "x": RegistrationTree.unregistered,
}


def _parameter_map(parameters):
    if parameters is None:
        return ParameterMap()

    entries, repeated = unique_entries(iter_items(parameters))
    if repeated:
        raise RepeatedParameterError(repeated)
    return ParameterMap(entries)


def _keep_value(name, value):
    return value


class MediaType:
    """
    Represent the media type *type_*/*subtype* with the given *parameters*.
    Either of *type_* and *subtype* falls back to the wildcard ``*`` if it is
    empty or omitted, so that ``MediaType()`` is ``*/*``. The suffix of a media
    type built this way is always :data:`None`; use :meth:`from_fields` to set
    one.

    *parameters* may be a mapping or an iterable of ``(name, value)`` pairs. If
    any names repeat when case is ignored,
    :class:`~mediatype.errors.RepeatedParameterError` is raised, listing all of
    the repetitions.

    :class:`MediaType` objects are meant to be treated as values. The
    :attr:`parameters` mapping can be modified, but this does not re-check the
    names for repetitions.
    """

    def __init__(self, type_=None, subtype=None, parameters=None):
        self._setup(type_ or "*", subtype or "*", None,
                    _parameter_map(parameters))

    def _setup(self, type_, subtype, suffix, parameters):
        self.__type = type_
        self.__subtype = subtype
        self.__suffix = suffix
        self.__parameters = parameters

    @classmethod
    def _from_validated(cls, type_, subtype, suffix, parameters):
        instance = cls.__new__(cls)
        instance._setup(type_ or "application",
                        subtype or "*",
                        suffix or None,
                        parameters)
        return instance

    @classmethod
    def from_parts(cls, type_=None, subtype=None, parameters=None):
        """
        Same as calling the class directly: missing type and subtype become
        ``*``.
        """
        return cls(type_, subtype, parameters)

    @classmethod
    def from_fields(cls, fields=None, **kwargs):
        """
        Create a media type from a mapping *fields* and/or keyword arguments
        with the keys ``type``, ``subtype``, ``suffix`` and ``parameters``.

        Unlike the positional form, a missing ``type`` defaults to
        ``application``, so ``MediaType.from_fields(subtype="json")`` is
        ``application/json``. A missing ``subtype`` is the wildcard, a missing
        ``suffix`` is :data:`None`.
        """
        fields = dict(fields or {}, **kwargs)
        return cls._from_validated(
            fields.get("type"),
            fields.get("subtype"),
            fields.get("suffix"),
            _parameter_map(fields.get("parameters")))

    @classmethod
    def parse(cls, text, process_parameter=None):
        """
        Parse the media type in *text*.

        Each parameter is passed through ``process_parameter(name, value)``
        before it is stored; the return value is stored instead of the raw
        string. If the callback returns :data:`None`, the parameter is dropped
        and does not count towards repetitions. Without a callback, the raw
        strings are kept.

        Raise :class:`~mediatype.errors.MalformedMediaType` if *text* is not
        a media type and :class:`~mediatype.errors.RepeatedParameterError` if
        a parameter name occurs more than once (ignoring case).
        """
        process_parameter = process_parameter or _keep_value
        parsed = parse_media_type(text)

        kept = []
        for name, value in parsed.parameters:
            processed = process_parameter(name, value)
            if processed is None:
                logger.debug("dropped parameter %r from %r", name, text)
                continue
            kept.append((name, processed))

        entries, repeated = unique_entries(kept)
        if repeated:
            raise RepeatedParameterError(repeated)

        return cls._from_validated(
            parsed.type,
            parsed.subtype,
            parsed.suffix,
            ParameterMap(entries))

    @property
    def type(self):
        return self.__type

    @property
    def subtype(self):
        return self.__subtype

    @property
    def suffix(self):
        return self.__suffix

    @property
    def parameters(self):
        """
        The :class:`~mediatype.parameters.ParameterMap` of this media type.
        """
        return self.__parameters

    @property
    def registration_tree(self):
        """
        One of the :class:`RegistrationTree` constants, depending on the facet
        of the subtype. Facets other than the known ones are returned as they
        are, e.g. ``"unk"`` for ``application/unk.content``.
        """
        facet, dot, _ = self.__subtype.partition(".")
        if not dot:
            return RegistrationTree.standards
        return _TREE_PREFIXES.get(facet, facet)

    @property
    def formatted(self):
        """
        The media type as text, parameters in their original order and
        spelling.
        """
        base = "{}/{}".format(self.__type, self.__subtype)
        if self.__suffix is not None:
            base += "+" + self.__suffix
        if self.__parameters:
            base += "; " + "; ".join(
                "{!s}={!s}".format(k, v)
                for k, v in self.__parameters.items())
        return base

    def equals(self, other, compare_parameter=None):
        """
        Return true if type, subtype and suffix of *other* are exactly the same
        as those of this media type and the parameters match.

        *compare_parameter* is called as ``compare_parameter(name, mine,
        theirs)`` for every parameter name of either side; see
        :func:`~mediatype.parameters.compare_parameters`.
        """
        return (self.__type == other.type and
                self.__subtype == other.subtype and
                self.__suffix == other.suffix and
                compare_parameters(self.__parameters,
                                   other.parameters,
                                   compare_parameter))

    def matches(self, other, compare_parameter=None):
        """
        Check whether this media type and *other* are compatible, taking
        wildcards on either side into account:

        * a wildcard type matches anything;
        * a wildcard subtype matches if the types and the parameters match; the
          suffix is not considered;
        * otherwise, this is the same as :meth:`equals`.
        """
        if self.__type == "*" or other.type == "*":
            return True

        if self.__subtype == "*" or other.subtype == "*":
            return (self.__type == other.type and
                    compare_parameters(self.__parameters,
                                       other.parameters,
                                       compare_parameter))

        return self.equals(other, compare_parameter)

    def with_parameters(self, parameters):
        """
        Return a copy of this media type with the parameters replaced by
        *parameters*.
        """
        return type(self)._from_validated(
            self.__type,
            self.__subtype,
            self.__suffix,
            _parameter_map(parameters))

    def __copy__(self):
        return type(self)._from_validated(
            self.__type,
            self.__subtype,
            self.__suffix,
            copy.copy(self.__parameters))

    def __eq__(self, other):
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return self.formatted

    def __repr__(self):
        return "{}(type={!r}, subtype={!r}, suffix={!r}, parameters={!r})".format(
            type(self).__qualname__,
            self.__type,
            self.__subtype,
            self.__suffix,
            dict(self.__parameters))
