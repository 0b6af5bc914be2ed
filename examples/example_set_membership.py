"""
Prove that a committed value belongs to a public set without revealing which element it is
"""

import random

from zkrange import DomainError, setup_set, prove_set, verify_set

params = setup_set({3, 7, 9})

r = random.SystemRandom().randint(1, 2**128)

proof = prove_set(7, r, params)
assert verify_set(proof, params)
print("Proof is valid: committed value is in {3, 7, 9}")

try:
    prove_set(5, r, params)
except DomainError:
    print("Proof cannot be generated: 5 is not in {3, 7, 9}")
