import unittest
import pytest
import regref
from regref import exceptions as exc
from regref.reference import HelpTestReferences, NameOnly, Tagged, Canonical
from regref.remote import (DEFAULT_TAG,
                           familiar_string,
                           fully_qualified_string,
                           is_name_only,
                           parse_id_or_reference,
                           parse_reference,
                           with_default_tag,
                           with_remote_name,)

digest = 'sha256:86e0e091d0da6bde2456dbb48306f3956bbeb2eae1b5b9a43045843f69fe4aaa'
hex_name = '1a3f5e7d9c1b3a5f7e9d1c3b5a7f9e1d3c5b7a9f1e3d5d7c9b1a3f5e7d9c1b3a'
long_namespace = '_'.join(['this_is_not_a_valid_namespace_because_its_lenth_is_greater_than_255'] * 4)


class TestParseReference(HelpTestReferences, unittest.TestCase):
    parse = parse_reference
    refs = (
        'docker/docker',
        'library/debian',
        'debian',
        'docker.io/docker/docker',
        'docker.io/library/debian',
        'docker.io/debian',
        'index.docker.io/docker/docker',
        'index.docker.io/library/debian',
        'index.docker.io/debian',
        '127.0.0.1:5000/docker/docker',
        '127.0.0.1:5000/library/debian',
        '127.0.0.1:5000/debian',
        'thisisthesongthatneverendsitgoesonandonandonthisisthesongthatnev',
        'docker-rules/docker',
        'docker---rules/docker',
        'doc/docker',
        'd/docker',
        'jess/t',
        'dock__er/docker',
        'busybox:latest',
        'busybox@' + digest,
        'localhost:5000/foo/bar:1.0',
    )
    refs_bad = (
        'https://github.com/docker/docker',
        'docker/Docker',
        '-docker',
        '-docker/docker',
        '-docker.io/docker/docker',
        'docker///docker',
        'docker.io/docker/Docker',
        'docker.io/docker///docker',
        hex_name,
        'docker.io/' + hex_name,
        'library/' + hex_name,
        'docker-/docker',
        '-docker-/docker',
        '____/____',
        '_docker/_docker',
        'dock..er/docker',
        'dock_.er/docker',
        'dock-.er/docker',
        'docker/',
        long_namespace + '/docker',
        '',
    )

    def test_rejection_kinds(self):
        kinds = (
            ('docker/Docker', exc.NotLowercaseError),
            ('Docker/docker', exc.NotLowercaseError),
            ('docker///docker', exc.InvalidNameComponentError),
            ('-docker', exc.InvalidNameComponentError),
            ('docker-/docker', exc.InvalidNameComponentError),
            ('dock..er/docker', exc.InvalidNameComponentError),
            (hex_name, exc.NameIsAmbiguousHexError),
            ('docker.io/' + hex_name, exc.NameIsAmbiguousHexError),
            (long_namespace + '/docker', exc.NamespaceTooLongError),
            ('busybox:-foo', exc.InvalidTagError),
            ('busybox@sha256:' + 'a' * 63 + 'z', exc.InvalidFormatError),
        )
        bads = []
        for string, kind in kinds:
            try:
                parse_reference(string)
                bads.append((string, 'no error'))
            except exc.InvalidFormatError as e:
                if not isinstance(e, kind):
                    bads.append((string, kind, e))

        assert not bads, bads

    def test_unsupported_digest_algorithm(self):
        with pytest.raises(exc.UnsupportedAlgorithmError):
            parse_reference('busybox@sha1:' + 'a' * 40)

    def test_round_trip_full_name(self):
        bads = []
        for r in self.refs:
            full_name = parse_reference(r).full_name
            if parse_reference(full_name).full_name != full_name:
                bads.append((r, full_name))

        assert not bads, bads


class TestEquivalence(unittest.TestCase):
    # remote_name, normalized name, full name, legacy or ambiguous spelling, hostname
    cases = (
        ('fooo/bar', 'fooo/bar', 'docker.io/fooo/bar',
         'index.docker.io/fooo/bar', 'docker.io'),
        ('library/ubuntu', 'ubuntu', 'docker.io/library/ubuntu',
         'library/ubuntu', 'docker.io'),
        ('nonlibrary/ubuntu', 'nonlibrary/ubuntu', 'docker.io/nonlibrary/ubuntu',
         None, 'docker.io'),
        ('other/library', 'other/library', 'docker.io/other/library',
         None, 'docker.io'),
        ('private/moonbase', '127.0.0.1:8000/private/moonbase', '127.0.0.1:8000/private/moonbase',
         None, '127.0.0.1:8000'),
        ('privatebase', '127.0.0.1:8000/privatebase', '127.0.0.1:8000/privatebase',
         None, '127.0.0.1:8000'),
        ('private/moonbase', 'example.com/private/moonbase', 'example.com/private/moonbase',
         None, 'example.com'),
        ('privatebase', 'example.com/privatebase', 'example.com/privatebase',
         None, 'example.com'),
        ('private/moonbase', 'example.com:8000/private/moonbase', 'example.com:8000/private/moonbase',
         None, 'example.com:8000'),
        ('privatebasee', 'example.com:8000/privatebasee', 'example.com:8000/privatebasee',
         None, 'example.com:8000'),
        ('library/ubuntu-12.04-base', 'ubuntu-12.04-base', 'docker.io/library/ubuntu-12.04-base',
         'index.docker.io/library/ubuntu-12.04-base', 'docker.io'),
    )

    def test_spellings(self):
        bads = []
        for remote_name, name, full_name, ambiguous, hostname in self.cases:
            spellings = [name, full_name]
            if ambiguous is not None:
                spellings.append(ambiguous)

            refs = []
            for s in spellings:
                refs.append(parse_reference(s))
                refs.append(with_remote_name(s))

            for ref in refs:
                got = ref.name, ref.full_name, ref.hostname, ref.remote_name
                expect = name, full_name, hostname, remote_name
                if got != expect:
                    bads.append((ref, expect, got))

            if len(set(refs)) != 1:
                bads.append(refs)

        assert not bads, bads

    def test_library_ubuntu(self):
        ref = parse_reference('library/ubuntu')
        assert ref.name == 'ubuntu'
        assert ref.full_name == 'docker.io/library/ubuntu'
        assert ref.hostname == 'docker.io'
        assert ref.remote_name == 'library/ubuntu'

    def test_private_host(self):
        ref = parse_reference('127.0.0.1:8000/private/moonbase')
        assert ref.full_name == '127.0.0.1:8000/private/moonbase'

    def test_nested_library(self):
        ref = parse_reference('docker.io/library/a/b')
        assert ref.name == 'a/b'
        assert ref.full_name == 'docker.io/a/b'
        assert ref == parse_reference('a/b')
        assert with_remote_name('library/a/b') == ref


def test_tag_and_digest():
    ref = parse_reference('busybox:latest@' + digest)
    assert not isinstance(ref, Tagged), f'{ref} should not support tag'
    assert isinstance(ref, Canonical), f'{ref} should support digest'
    assert ref.digest == digest
    assert str(ref) == 'busybox@' + digest


def test_tagged():
    ref = parse_reference('index.docker.io/library/busybox:1.36')
    assert isinstance(ref, Tagged)
    assert str(ref) == 'busybox:1.36'
    assert ref.full_name == 'docker.io/library/busybox'


def test_invalid_reference_components():
    with pytest.raises(exc.InvalidFormatError):
        with_remote_name('-foo')

    ref = with_remote_name('busybox')
    with pytest.raises(exc.InvalidTagError):
        regref.with_tag(ref, '-foo')

    with pytest.raises(exc.InvalidDigestError):
        regref.with_digest(ref, 'foo')


def test_with_default_tag():
    ref = with_remote_name('busybox')
    assert is_name_only(ref)
    tagged = with_default_tag(ref)
    assert isinstance(tagged, Tagged)
    assert tagged.tag == DEFAULT_TAG == 'latest'
    assert not is_name_only(tagged)
    assert with_default_tag(tagged) is tagged


def test_with_default_tag_leaves_digest():
    ref = parse_reference('busybox@' + digest)
    assert not is_name_only(ref)
    assert with_default_tag(ref) is ref


def test_with_default_tag_keeps_tag():
    ref = parse_reference('busybox:1.0')
    assert with_default_tag(ref).tag == '1.0'


def test_parse_id_bare_hex():
    dgst, ref = parse_id_or_reference(digest.split(':')[1])
    assert ref is None
    assert dgst == digest


def test_parse_id_digest():
    dgst, ref = parse_id_or_reference(digest)
    assert ref is None
    assert dgst.algorithm == 'sha256'


def test_parse_id_reference():
    dgst, ref = parse_id_or_reference('busybox')
    assert dgst is None
    assert ref == NameOnly('busybox')

    dgst, ref = parse_id_or_reference('docker.io/library/busybox:latest')
    assert dgst is None
    assert ref == Tagged('busybox', 'latest')


def test_parse_id_neither():
    with pytest.raises(exc.MalformedReferenceError):
        parse_id_or_reference('-nope')


def test_familiar_and_fully_qualified():
    ref = regref.parse_named('index.docker.io/library/busybox:latest')
    assert familiar_string(ref) == 'busybox:latest'
    assert fully_qualified_string(ref) == 'docker.io/library/busybox:latest'

    ref = parse_reference('example.com/foo@' + digest)
    assert familiar_string(ref) == 'example.com/foo@' + digest
    assert fully_qualified_string(ref) == 'example.com/foo@' + digest

    ref = parse_reference('ubuntu')
    assert fully_qualified_string(ref) == 'docker.io/library/ubuntu'
