"""
CCS08 set membership and range proofs
"""

from .setup import (
    TrustedSetup,
    SetParameters,
    BoundedParameters,
    setup_set,
    setup_bounded,
    check_signatures,
)
from .set_membership import SetMembershipProof, prove_set, verify_set
from .range_ul import DigitProof, BoundedRangeProof, prove_bounded, verify_bounded
from .protocol import (
    CCS08,
    RangeProof,
    composer_setup,
    composer_prove,
    composer_verify,
)

__all__ = [
    "TrustedSetup",
    "SetParameters",
    "BoundedParameters",
    "setup_set",
    "setup_bounded",
    "check_signatures",
    "SetMembershipProof",
    "prove_set",
    "verify_set",
    "DigitProof",
    "BoundedRangeProof",
    "prove_bounded",
    "verify_bounded",
    "CCS08",
    "RangeProof",
    "composer_setup",
    "composer_prove",
    "composer_verify",
]
