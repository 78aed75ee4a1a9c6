""" Collapse the equivalent spellings of a repository name.

    ubuntu
    library/ubuntu
    docker.io/library/ubuntu
    index.docker.io/library/ubuntu

all name the same thing. The normalized (minimal) form drops the
default hostname and the default namespace, the full form always
has both. Names on any other host are never abbreviated.
"""

from regref import exceptions as exc
from regref.digest import is_hex
from regref.utils import log

DEFAULT_HOSTNAME = 'docker.io'
LEGACY_DEFAULT_HOSTNAME = 'index.docker.io'
DEFAULT_REPO_PREFIX = 'library/'


def _is_hostname(candidate):
    return ('.' in candidate or
            ':' in candidate or
            candidate == 'localhost')


def split_hostname(name):
    """ name -> (hostname, remote_name)

        Only the part before the first slash can be a hostname and
        only if it looks like one, otherwise it is a namespace on the
        default host. The name should already have been validated. """
    first, slash, rest = name.partition('/')
    if slash and _is_hostname(first):
        hostname, remote_name = first, rest
    else:
        hostname, remote_name = DEFAULT_HOSTNAME, name

    if hostname == LEGACY_DEFAULT_HOSTNAME:
        hostname = DEFAULT_HOSTNAME

    if hostname == DEFAULT_HOSTNAME and '/' not in remote_name:
        remote_name = DEFAULT_REPO_PREFIX + remote_name

    return hostname, remote_name


def normalize(name):
    """ return the minimal spelling of name, no default hostname
        and no default namespace, uppercase is an error not a typo """
    hostname, remote_name = split_hostname(name)
    if remote_name.lower() != remote_name:
        raise exc.NotLowercaseError(f'repository name must be lowercase: {name!r}')

    if hostname == DEFAULT_HOSTNAME:
        if name.startswith(LEGACY_DEFAULT_HOSTNAME + '/'):
            log.debug(f'folded {LEGACY_DEFAULT_HOSTNAME} into {DEFAULT_HOSTNAME} for {name!r}')

        if remote_name.startswith(DEFAULT_REPO_PREFIX):
            return remote_name[len(DEFAULT_REPO_PREFIX):]

        return remote_name

    return name


def validate_name(name):
    """ 64 hex characters are content ids not names """
    if is_hex(name):
        msg = f'invalid repository name {name!r}, cannot specify 64 character hexadecimal strings'
        raise exc.NameIsAmbiguousHexError(msg)

    return name
