""" The character level grammar for references.

    reference  := name [ ":" tag ] [ "@" digest ]
    name       := [ hostname "/" ] component [ "/" component ]*
    component  := alphanumeric [ separator alphanumeric ]*
    separator  := "." | "_" | "__" | "-"+
    hostname   := hostcomponent [ "." hostcomponent ]* [ ":" port ]
    tag        := [A-Za-z0-9_] [A-Za-z0-9._-]{0,127}
    digest     := algorithm ":" hex

Everything here is a pure function of its input. The validators
return their input unchanged when it is legal and raise a
GrammarError subclass whose rule attribute names what went wrong.
"""

import re
from regref import exceptions as exc
from regref.digest import is_hex

NAMESPACE_MAX_LENGTH = 255
TAG_MAX_LENGTH = 128

alphanumeric = '[a-z0-9]+'
separator = '(?:[._]|__|[-]+)'
path_component = f'{alphanumeric}(?:{separator}{alphanumeric})*'
hostname_component = '(?:[a-z0-9]|[a-z0-9][a-z0-9-]*[a-z0-9])'
hostname = rf'{hostname_component}(?:\.{hostname_component})*(?::[0-9]+)?'
name = f'(?:{hostname}/)?{path_component}(?:/{path_component})*'
tag = f'[A-Za-z0-9_][A-Za-z0-9._-]{{0,{TAG_MAX_LENGTH - 1}}}'
digest = '[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,}'
reference = f'({name})(?::({tag}))?(?:@({digest}))?'

# always use fullmatch with these, $ matches before a trailing newline
_path_component = re.compile(path_component)
_hostname = re.compile(hostname)
_name = re.compile(name)
_tag = re.compile(tag)
_reference = re.compile(reference)
_illegal_component_chars = re.compile('[^a-z0-9._-]')

_separators = '._-'


def _component_rule(component):
    if not component:
        return 'empty-component'
    elif component.lower() != component:
        return 'uppercase'
    elif _illegal_component_chars.search(component):
        return 'illegal-character'
    elif component[0] in _separators or component[-1] in _separators:
        return 'separator-position'
    elif '..' in component:
        return 'consecutive-periods'
    elif _path_component.fullmatch(component) is None:
        return 'separator-sequence'


def _diagnose_name(raw):
    components = raw.split('/')
    if len(components) > 1 and _hostname.fullmatch(components[0]):
        components = components[1:]

    for component in components:
        rule = _component_rule(component)
        if rule == 'uppercase':
            raise exc.NotLowercaseError(f'repository name must be lowercase: {raw!r}')
        elif rule is not None:
            msg = f'invalid component {component!r} in repository name {raw!r}: {rule}'
            raise exc.InvalidNameComponentError(msg, rule=rule)

    raise exc.InvalidNameComponentError(f'invalid repository name {raw!r}')


def validate_name_grammar(raw):
    if not raw:
        raise exc.InvalidNameComponentError('repository name must have at least one component',
                                            rule='empty-name')

    namespace, slash, _ = raw.partition('/')
    if slash and len(namespace) > NAMESPACE_MAX_LENGTH:
        msg = (f'namespace {namespace[:32]!r}... is {len(namespace)} characters, '
               f'the maximum is {NAMESPACE_MAX_LENGTH}')
        raise exc.NamespaceTooLongError(msg)

    if is_hex(raw):
        msg = f'invalid repository name {raw!r}, cannot specify 64 character hexadecimal strings'
        raise exc.NameIsAmbiguousHexError(msg)

    if _name.fullmatch(raw) is None:
        _diagnose_name(raw)

    return raw


def validate_tag_grammar(raw):
    if not raw:
        raise exc.InvalidTagError('tag may not be empty', rule='empty-tag')
    elif len(raw) > TAG_MAX_LENGTH:
        raise exc.InvalidTagError(f'tag is longer than {TAG_MAX_LENGTH} characters',
                                  rule='tag-too-long')
    elif _tag.fullmatch(raw) is None:
        rule = 'separator-position' if raw[0] in '.-' else 'illegal-character'
        raise exc.InvalidTagError(f'invalid tag {raw!r}: {rule}', rule=rule)

    return raw


def _rough_split(raw):
    """ split on the separators without caring about the grammar
        so that we can say which part of a bad reference is bad """
    name_tag, _, digest = raw.partition('@')
    name, tag = name_tag, None
    colon = name_tag.rfind(':')
    if colon > name_tag.rfind('/'):
        name, tag = name_tag[:colon], name_tag[colon + 1:]

    return name, tag, digest or None


def split_reference(raw):
    """ name[:tag][@digest] -> (name, tag, digest)

        tag and digest are None when absent, the digest is only
        checked for syntax, see regref.digest for the real thing """
    if not raw:
        raise exc.InvalidNameComponentError('repository name must have at least one component',
                                            rule='empty-name')

    match = _reference.fullmatch(raw)
    if match is None:
        name, tag, _ = _rough_split(raw)
        validate_name_grammar(name)
        if tag is not None:
            validate_tag_grammar(tag)

        raise exc.InvalidFormatError(f'invalid reference format {raw!r}')

    name, tag, digest = match.groups()
    validate_name_grammar(name)
    return name, tag, digest
