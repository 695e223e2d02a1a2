"""
Media type parameters
#####################

Parameter names are case-insensitive, but the original spelling is what gets
written back out when a media type is formatted. :class:`ParameterMap` thus
uses case folding for lookups while iteration walks the stored keys as they
were given.

.. autoclass:: ParameterMap
   :members: canonical_key, discard

.. autofunction:: find_repeated_keys

.. autofunction:: unique_entries

.. autofunction:: compare_parameters

"""

import collections.abc


def iter_items(mapping_or_iterable):
    try:
        return mapping_or_iterable.items()
    except AttributeError:
        return mapping_or_iterable


class ParameterMap(collections.abc.MutableMapping):
    """
    A mapping from parameter names to values which ignores case on lookup,
    membership tests and removal, but preserves the spelling and order of the
    keys for iteration.

    *mapping_or_iterable* may be a mapping or an iterable of ``(name, value)``
    pairs; *kwargs* are added after it. Keys which collide when case is ignored
    overwrite the earlier value; no duplicate checking takes place here.
    """

    _transform_key = staticmethod(str.casefold)

    def __init__(self, mapping_or_iterable=(), **kwargs):
        super().__init__()
        self._storage = {}
        self._index = {}
        for key, value in iter_items(mapping_or_iterable):
            self[key] = value
        for key, value in kwargs.items():
            self[key] = value

    def canonical_key(self, key):
        """
        Return the stored spelling of *key*, or :data:`None` if no key matches
        *key* when case is ignored.
        """
        if not isinstance(key, str):
            return None
        if key in self._storage:
            return key
        return self._index.get(self._transform_key(key))

    def discard(self, key):
        """
        Remove *key* (ignoring case) if it is present. Unlike ``del``, this does
        not complain about missing keys.
        """
        canonical = self.canonical_key(key)
        if canonical is not None:
            del self[canonical]

    def __getitem__(self, key):
        canonical = self.canonical_key(key)
        if canonical is None:
            raise KeyError(key)
        return self._storage[canonical]

    def __setitem__(self, key, value):
        canonical = self.canonical_key(key)
        if canonical is None:
            canonical = key
            self._index[self._transform_key(key)] = key
        self._storage[canonical] = value

    def __delitem__(self, key):
        canonical = self.canonical_key(key)
        if canonical is None:
            raise KeyError(key)
        del self._storage[canonical]
        del self._index[self._transform_key(canonical)]

    def __contains__(self, key):
        return self.canonical_key(key) is not None

    def __iter__(self):
        return iter(self._storage)

    def __len__(self):
        return len(self._storage)

    def __copy__(self):
        return type(self)(self._storage)

    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self._storage)


def unique_entries(entries):
    """
    Walk the ``(name, value)`` pairs in *entries* in order. Return a tuple
    ``(unique, repeated)``, where *unique* is the list of entries whose name
    occurs for the first time (ignoring case) and *repeated* lists the names of
    all other entries, in their original spelling.
    """
    seen = set()
    unique = []
    repeated = []
    for name, value in entries:
        folded = name.casefold()
        if folded in seen:
            repeated.append(name)
            continue
        seen.add(folded)
        unique.append((name, value))
    return unique, repeated


def find_repeated_keys(entries):
    """
    Return the names of all entries in *entries* which repeat an earlier name
    when case is ignored. The first occurence is never part of the result, but
    every later one is.
    """
    _, repeated = unique_entries(entries)
    return repeated


def compare_parameters(a, b, compare=None):
    """
    Compare the parameters in *a* against those in *b* key by key.

    The keys of both mappings are united (ignoring case). For each key,
    ``compare(name, value_a, value_b)`` is called, with :data:`None` standing
    in for a value missing on one side. If *compare* returns :data:`True` or
    :data:`False`, that is the result for the key; if it returns :data:`None`
    (or *compare* is :data:`None`), the values are compared with ``==``.

    Return :data:`False` as soon as the result for one key is :data:`False`,
    :data:`True` otherwise. Other results, such as ``0``, do not stop the
    comparison.
    """
    if not isinstance(a, ParameterMap):
        a = ParameterMap(a)
    if not isinstance(b, ParameterMap):
        b = ParameterMap(b)

    names = ParameterMap()
    for name in a:
        names[name] = True
    for name in b:
        if name not in names:
            names[name] = True

    for name in names:
        value_a = a.get(name)
        value_b = b.get(name)
        result = None
        if compare is not None:
            result = compare(name, value_a, value_b)
        if result is None:
            result = value_a == value_b
        if result is False:
            return False

    return True
