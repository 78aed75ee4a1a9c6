""" Entrypoints that turn strings into normalized references. """

from regref import grammar
from regref import exceptions as exc
from regref.digest import Digest, CANONICAL_ALGORITHM, is_hex
from regref.normalize import normalize, validate_name
from regref.reference import (Tagged,
                              Canonical,
                              with_name,
                              with_tag,
                              with_digest,)
from regref.utils import log

DEFAULT_TAG = 'latest'


def with_remote_name(name):
    """ the normalized NameOnly reference for name, any of the
        equivalent spellings of a name produce the same value """
    name = validate_name(normalize(name))
    return with_name(name)


def parse_reference(string):
    """ parse [hostname/]name[:tag][@digest] into a normalized reference

        When both a tag and a digest are present the result is
        Canonical and the tag is gone. Every grammar failure is an
        InvalidFormatError, the subclass says what was wrong. """
    name, tag, digest = grammar.split_reference(string)
    ref = with_remote_name(name)
    if digest is not None:
        if tag is not None:
            log.debug(f'dropping tag {tag!r} in favor of digest for {string!r}')

        return with_digest(ref, digest)
    elif tag is not None:
        return with_tag(ref, tag)

    return ref


def is_name_only(ref):
    return not isinstance(ref, (Tagged, Canonical))


def with_default_tag(ref):
    """ tag ref with DEFAULT_TAG if it has neither tag nor digest """
    if is_name_only(ref):
        return with_tag(ref, DEFAULT_TAG)

    return ref


def parse_id_or_reference(id_or_ref):
    """ -> (digest, None) or (None, reference)

        A bare 64 character hex string is a content id and gets
        the canonical algorithm prefixed to it. """
    if is_hex(id_or_ref):
        id_or_ref = CANONICAL_ALGORITHM + ':' + id_or_ref

    try:
        return Digest(id_or_ref), None
    except exc.InvalidDigestError:
        log.debug(f'{id_or_ref!r} is not a digest, parsing as a reference')

    return None, parse_reference(id_or_ref)


def _suffix(ref):
    if isinstance(ref, Tagged):
        return ':' + ref.tag
    elif isinstance(ref, Canonical):
        return '@' + ref.digest

    return ''


def familiar_string(ref):
    """ the shortest spelling, what a human would type """
    return normalize(ref.name) + _suffix(ref)


def fully_qualified_string(ref):
    """ e.g. docker.io/library/busybox:latest """
    return ref.full_name + _suffix(ref)
