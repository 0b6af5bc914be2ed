"""Exceptions raised by the range proof engine"""


class RangeProofError(Exception):
    """Base class of every error raised by zkrange"""


class DomainError(RangeProofError, ValueError):
    """Value has no signature in the public parameters"""


class DecompositionError(RangeProofError, ValueError):
    """Value cannot be written with `l` digits in base `u`"""


class ConfigurationError(RangeProofError, ValueError):
    """Invalid interval or digit shape"""


class MalformedProofError(RangeProofError, TypeError):
    """Proof or parameters are missing or structurally unusable"""


class PrimitiveError(RangeProofError):
    """Failure inside the signature, commitment or randomness primitives"""


class SignatureError(PrimitiveError):
    pass
