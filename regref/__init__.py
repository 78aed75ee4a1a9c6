from regref import exceptions as exc
from regref.digest import (Digest,
                           CANONICAL_ALGORITHM,
                           is_hex,
                           validate_hex,)
from regref.grammar import (NAMESPACE_MAX_LENGTH,
                            TAG_MAX_LENGTH,
                            split_reference,
                            validate_name_grammar,
                            validate_tag_grammar,)
from regref.normalize import (DEFAULT_HOSTNAME,
                              LEGACY_DEFAULT_HOSTNAME,
                              DEFAULT_REPO_PREFIX,
                              normalize,
                              split_hostname,
                              validate_name,)
from regref.reference import (Reference,
                              NameOnly,
                              Tagged,
                              Canonical,
                              parse_named,
                              with_name,
                              with_tag,
                              with_digest,)
from regref.remote import (DEFAULT_TAG,
                           familiar_string,
                           fully_qualified_string,
                           is_name_only,
                           parse_id_or_reference,
                           parse_reference,
                           with_default_tag,
                           with_remote_name,)

__version__ = '0.0.1.dev0'
