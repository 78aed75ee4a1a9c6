""" References are immutable values with a validated name.

There are exactly three kinds

    NameOnly   name
    Tagged     name:tag
    Canonical  name@digest

a reference is never more than one of these at a time. Use
isinstance to find out which one you have. Every constructor
validates its inputs so a reference that exists is well formed.

The hostname aware accessors (full_name, hostname, remote_name)
are computed from the name every time they are asked for so they
agree no matter which spelling of the name was used to build the
reference.
"""

from regref import grammar
from regref import exceptions as exc
from regref.digest import Digest
from regref.normalize import split_hostname
from regref.utils import log


class Reference:
    """ Base class for all references """

    __slots__ = ('_name',)

    def __new__(cls, *args, **kwargs):
        if cls is Reference:
            raise TypeError('Reference cannot be instantiated directly, '
                            'use NameOnly, Tagged, or Canonical')

        return super().__new__(cls)

    def __init__(self, name):
        object.__setattr__(self, '_name', grammar.validate_name_grammar(name))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    @property
    def name(self):
        return self._name

    @property
    def full_name(self):
        """ hostname/remote_name, e.g. docker.io/library/ubuntu """
        hostname, remote_name = split_hostname(self._name)
        return hostname + '/' + remote_name

    @property
    def hostname(self):
        hostname, _ = split_hostname(self._name)
        return hostname

    @property
    def remote_name(self):
        """ the repository path without the hostname, e.g. library/ubuntu """
        _, remote_name = split_hostname(self._name)
        return remote_name

    def _fields(self):
        return self._name,

    def __reduce__(self):
        # revalidates on unpickle, there is no other way in
        return self.__class__, self._fields()

    def __eq__(self, other):
        if not isinstance(other, Reference):
            return NotImplemented

        return type(self) is type(other) and str(self) == str(other)

    def __hash__(self):
        return hash((self.__class__.__name__, str(self)))

    def __str__(self):
        return self._name

    def __repr__(self):
        args = ', '.join(repr(str(f)) for f in self._fields())
        return f'{self.__class__.__name__}({args})'


class NameOnly(Reference):
    """ just a repository name """

    __slots__ = ()


class Tagged(Reference):
    """ name plus a tag """

    __slots__ = ('_tag',)

    def __init__(self, name, tag):
        super().__init__(name)
        object.__setattr__(self, '_tag', grammar.validate_tag_grammar(tag))

    @property
    def tag(self):
        return self._tag

    def _fields(self):
        return self._name, self._tag

    def __str__(self):
        return self._name + ':' + self._tag


class Canonical(Reference):
    """ name plus a content digest """

    __slots__ = ('_digest',)

    def __init__(self, name, digest):
        super().__init__(name)
        object.__setattr__(self, '_digest', Digest(digest))

    @property
    def digest(self):
        return self._digest

    def _fields(self):
        return self._name, self._digest

    def __str__(self):
        return self._name + '@' + self._digest


def with_name(name):
    return NameOnly(name)


def with_tag(ref, tag):
    """ a new reference with the name from ref and tag,
        any tag or digest already on ref is replaced """
    return Tagged(ref.name, tag)


def with_digest(ref, digest):
    """ a new reference with the name from ref and digest,
        any tag or digest already on ref is replaced """
    return Canonical(ref.name, digest)


def parse_named(string):
    """ parse name[:tag][@digest] without normalizing the name

        If both a tag and a digest are present the digest wins
        and the tag is dropped. """
    name, tag, digest = grammar.split_reference(string)
    ref = with_name(name)
    if digest is not None:
        if tag is not None:
            log.debug(f'dropping tag {tag!r} in favor of digest for {string!r}')

        return with_digest(ref, digest)
    elif tag is not None:
        return with_tag(ref, tag)

    return ref


class HelpTestReferences:
    """ mixin for unittest.TestCase, set parse, refs, and refs_bad """

    parse = None
    refs = tuple()
    refs_bad = tuple()

    @classmethod
    def setUpClass(cls):
        if not hasattr(HelpTestReferences, '_pickle'):
            import copy
            HelpTestReferences._copy = copy
            import pickle
            HelpTestReferences._pickle = pickle

    def _parse(self, string):
        return type(self).parse(string)

    def test_parse(self):
        bads = []
        for r in self.refs:
            ref = self._parse(r)
            # a reference must survive a trip through its own string
            if self._parse(str(ref)) != ref:
                bads.append((r, ref))

            if not ref.name or ref.name.lower() != ref.name:
                bads.append((r, ref.name))

        assert not bads, bads

    def test_pickle(self):
        bads = []
        for r in self.refs:
            ref = self._parse(r)
            hrm = self._pickle.dumps(ref)
            tv = self._pickle.loads(hrm)
            if tv != ref or tv.full_name != ref.full_name:
                bads.append((tv, ref))

        assert not bads, bads

    def test_copy(self):
        bads = []
        for r in self.refs:
            ref = self._parse(r)
            tv = self._copy.deepcopy(ref)
            if tv != ref or hash(tv) != hash(ref):
                bads.append((tv, ref))

        assert not bads, bads

    def test_immutable(self):
        for r in self.refs:
            ref = self._parse(r)
            try:
                ref._name = 'lol'
                raise AssertionError(f'managed to mutate {ref!r}')
            except AttributeError:
                pass

    def test_malformed(self):
        bads = []
        for r in self.refs_bad:
            try:
                ref = self._parse(r)
                bads.append((r, ref))
            except exc.MalformedReferenceError:
                pass

        assert not bads, bads
