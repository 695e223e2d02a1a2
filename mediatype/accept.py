"""
Accept header negotiation
#########################

.. autoclass:: MediaRange
   :members: parse, match

.. autoclass:: AcceptList
   :members: append_header, get_quality, best_match

.. autofunction:: all_media_types

"""

import logging

from .mediatype import MediaType

logger = logging.getLogger(__name__)

def _ignore_unnamed(name, mine, theirs):
    # parameters the range does not name are not restricted
    if mine is None:
        return True
    return None


class MediaRange:
    """
    One element of an ``Accept`` header: the :class:`MediaType` *media_type*,
    which may contain wildcards, along with its quality *q*.

    .. attribute:: wildcards

       The number of wildcards in type and subtype.

    .. attribute:: specifity

       ``-wildcards`` if there are any wildcards, the number of parameters
       otherwise. More specific ranges take precedence over less specific ones.
    """

    def __init__(self, media_type, q=1.0):
        super().__init__()
        self.media_type = media_type
        self.q = q
        self.wildcards = sum(
            1 for value in (media_type.type, media_type.subtype)
            if value == "*")
        self.specifity = (-self.wildcards) or len(media_type.parameters)

    @classmethod
    def parse(cls, s):
        """
        Parse a single media range *s* such as ``text/html; level=1; q=0.5``.
        The ``q`` parameter is taken out of the parameters and used as quality.

        Raise :class:`ValueError` if *s* is malformed or the quality is not a
        number.
        """
        q = 1.0

        def take_quality(name, value):
            nonlocal q
            if name.casefold() != "q":
                return value
            try:
                q = float(value)
            except ValueError:
                raise ValueError("not a valid q value: {}".format(value)) \
                    from None
            return None

        return cls(MediaType.parse(s.strip(), take_quality), q)

    def match(self, candidate):
        """
        Return true if the :class:`MediaType` *candidate* is acceptable under
        this range. Parameters of *candidate* which this range does not name
        are ignored.
        """
        return self.media_type.matches(candidate, _ignore_unnamed)

    def __eq__(self, other):
        if not isinstance(other, MediaRange):
            return NotImplemented
        return self.q == other.q and self.media_type == other.media_type

    __hash__ = None

    def __str__(self):
        return "{}; q={}".format(self.media_type, self.q)

    def __repr__(self):
        return "{}({!r}, q={!r})".format(
            type(self).__name__,
            self.media_type,
            self.q)


class AcceptList:
    """
    Holds the :class:`MediaRange` objects of one or more ``Accept`` headers and
    picks the most preferred of a set of candidate media types.
    """

    def __init__(self, items=()):
        super().__init__()
        self._items = list(items)

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def append_header(self, header):
        """
        Append the comma separated media ranges from *header* to the list.

        Ranges which fail to parse are logged as warning and skipped.
        """
        if not header:
            return

        for section in header.split(","):
            try:
                item = MediaRange.parse(section)
            except ValueError as err:
                logger.warning("dropped malformed media range: %r (%s)",
                               section,
                               err)
                continue

            self._items.append(item)

    def get_quality(self, candidate):
        """
        Return the quality of the most specific range which accepts the
        :class:`MediaType` *candidate*, or ``0`` if none does.
        """
        matching = [item for item in self._items if item.match(candidate)]
        if not matching:
            return 0
        return max(matching, key=lambda item: item.specifity).q

    def best_match(self, candidates):
        """
        Return the media type from *candidates* with the highest quality, the
        earliest one on ties. Return :data:`None` if no candidate is
        acceptable.
        """
        best, best_q = None, 0
        for candidate in candidates:
            q = self.get_quality(candidate)
            if q > best_q:
                best, best_q = candidate, q
        return best


def all_media_types():
    return AcceptList([MediaRange(MediaType("*", "*"))])
