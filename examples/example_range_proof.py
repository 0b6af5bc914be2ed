"""
Prove that an age lies in [18, 200] without revealing the age itself
using CCS08 signature-based range proofs
"""

import random

from zkrange import CCS08, DecompositionError

zkrp = CCS08("BN254")
zkrp.setup(18, 200)

# secret value and commitment randomness
age = 42
r = random.SystemRandom().randint(1, zkrp.order - 1)

proof = zkrp.prove(age, r)
assert zkrp.verify(proof)
print("Proof is valid: committed age is in [18, 200]")

# out of range secret value
age = 16

try:
    zkrp.prove(age, r)
except DecompositionError:
    print(f"Proof cannot be generated: {age} is not in [18, 200]")
