class RegrefError(Exception):
    """ base class for regref errors """


class MalformedReferenceError(RegrefError):
    """ Your input cannot be determined to be a reference
        of the kind you asked for, therefore we will NOT create
        an object of that type, it cannot exist. """


class InvalidFormatError(MalformedReferenceError):
    """ The input could not be parsed as a reference at all.

        More specific failures subclass this so that callers
        who only care that parsing failed can catch one thing. """


class GrammarError(InvalidFormatError):
    """ Some sub-part of a reference violates its grammar. """

    rule = None

    def __init__(self, message, rule=None):
        super().__init__(message)
        if rule is not None:
            self.rule = rule


class InvalidNameComponentError(GrammarError):
    """ a path component of the name is malformed """


class NotLowercaseError(InvalidNameComponentError):
    """ repository names must be lowercase, we never coerce them """
    rule = 'uppercase'


class NamespaceTooLongError(GrammarError):
    """ the part of the name before the first slash is too long """
    rule = 'namespace-too-long'


class InvalidTagError(GrammarError):
    """ the tag does not match the tag grammar """


class NameIsAmbiguousHexError(InvalidFormatError):
    """ 64 hex characters are reserved for content ids
        and can never be used as a repository name """


class InvalidDigestError(MalformedReferenceError):
    """ base class for digest errors """


class InvalidDigestFormatError(InvalidDigestError):
    """ not algorithm:hex """


class UnsupportedAlgorithmError(InvalidDigestError):
    """ we know nothing about this hash algorithm """


class InvalidDigestLengthError(InvalidDigestError):
    """ the hex portion is the wrong length for the algorithm """
