# Discrete log of the second G2 generator `H` with respect to G2.
# Pinned so that independently built provers and verifiers agree on `H`.
H_SCALAR = 18560948149108576432482904553159745978835170526553990798435819795989606410925

# Fiat-Shamir domain separation labels
SET_MEMBERSHIP_LABEL = b"zkrange/ccs08/set-membership"
BOUNDED_RANGE_LABEL = b"zkrange/ccs08/bounded-range"

# Upper bound for the derived digit base `u` of the range composer.
# The public parameters hold one signature per digit, so `u` bounds their size.
MAX_DIGIT_BASE = 100

DEFAULT_CURVE = "BN254"
