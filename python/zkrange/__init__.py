"""
Zero-knowledge range proofs from Boneh-Boyen signatures over pairing groups
"""

from .ccs08 import *
from .errors import (
    RangeProofError,
    DomainError,
    DecompositionError,
    ConfigurationError,
    MalformedProofError,
    PrimitiveError,
    SignatureError,
)

__version__ = "0.1.0"
