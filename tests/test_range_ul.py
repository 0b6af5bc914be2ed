import dataclasses
import random

import pytest

from zkrange import (
    BoundedRangeProof,
    ConfigurationError,
    DigitProof,
    DecompositionError,
    MalformedProofError,
    check_signatures,
    prove_bounded,
    setup_bounded,
    setup_set,
    verify_bounded,
)
from zkrange.commitment import Pedersen
from zkrange.ecc import EllipticCurve


@pytest.fixture(scope="module")
def params_binary():
    return setup_bounded(2, 8, rng=random.Random(1337))


@pytest.fixture(scope="module")
def params_small():
    return setup_bounded(4, 2, rng=random.Random(7331))


@pytest.fixture(scope="module")
def proof_small(params_small):
    return prove_bounded(13, 4242, params_small, random.Random(1))


def test_setup_bounded(params_binary):

    assert params_binary.u == 2
    assert params_binary.l == 8
    assert params_binary.upper == 256
    assert set(params_binary.signatures) == {0, 1}
    assert check_signatures(params_binary)


def test_setup_bounded_invalid_shape():

    with pytest.raises(ConfigurationError):
        setup_bounded(1, 8)

    with pytest.raises(ConfigurationError):
        setup_bounded(0, 8)

    with pytest.raises(ConfigurationError):
        setup_bounded(2, 0)


def test_bounded_range(params_binary):

    proof = prove_bounded(200, 1234567, params_binary)

    assert len(proof.digits) == 8
    assert verify_bounded(proof, params_binary)


def test_bounded_range_out_of_range(params_binary):

    with pytest.raises(DecompositionError):
        prove_bounded(300, 1234567, params_binary)

    with pytest.raises(DecompositionError):
        prove_bounded(-1, 1234567, params_binary)


def test_bounded_range_edges(params_small):

    for x in (0, 15):
        assert verify_bounded(prove_bounded(x, 99, params_small), params_small)

    with pytest.raises(DecompositionError):
        prove_bounded(16, 99, params_small)


def test_bounded_range_tampered(params_small, proof_small):

    assert verify_bounded(proof_small, params_small)

    E = EllipticCurve(params_small.curve)
    q = E.order
    proof = proof_small

    def replace_digit(i, **changes):
        digits = list(proof.digits)
        digits[i] = dataclasses.replace(digits[i], **changes)
        return dataclasses.replace(proof, digits=tuple(digits))

    tampered = [
        dataclasses.replace(proof, c=(proof.c + 1) % q),
        dataclasses.replace(proof, zr=(proof.zr + 1) % q),
        dataclasses.replace(proof, D=proof.D + E.G2()),
        dataclasses.replace(proof, c=proof.c + q),
        dataclasses.replace(proof, zr=proof.zr + q),
        dataclasses.replace(proof, C=proof.C + E.G2()),
    ]
    for i, digit in enumerate(proof.digits):
        tampered += [
            replace_digit(i, zsig=(digit.zsig + 1) % q),
            replace_digit(i, zv=(digit.zv + 1) % q),
            replace_digit(i, V=digit.V * 3),
            replace_digit(i, a=digit.a * E.base_pairing()),
            replace_digit(i, zsig=digit.zsig + q),
            replace_digit(i, zv=digit.zv + q),
        ]

    for p in tampered:
        assert not verify_bounded(p, params_small)


def test_bounded_range_digit_splicing(params_small):

    # digit proofs produced under another challenge must not verify
    first = prove_bounded(5, 10, params_small)
    second = prove_bounded(6, 10, params_small)

    spliced = dataclasses.replace(first, digits=(second.digits[0], first.digits[1]))

    assert not verify_bounded(spliced, params_small)


def test_bounded_range_wrong_length(params_small, proof_small):

    truncated = dataclasses.replace(proof_small, digits=proof_small.digits[:1])

    with pytest.raises(MalformedProofError):
        verify_bounded(truncated, params_small)

    with pytest.raises(MalformedProofError):
        verify_bounded(None, params_small)


def test_bounded_range_deterministic_rng(params_small):

    p1 = prove_bounded(9, 31337, params_small, random.Random(9))
    p2 = prove_bounded(9, 31337, params_small, random.Random(9))

    assert isinstance(p1, BoundedRangeProof)
    assert p1 == p2


def test_bounded_range_parallel(params_small, monkeypatch):

    monkeypatch.setenv("ZKRANGE_PARALLEL_CPU", "2")

    proof = prove_bounded(11, 2024, params_small, random.Random(3))
    assert verify_bounded(proof, params_small)

    monkeypatch.delenv("ZKRANGE_PARALLEL_CPU")
    assert proof == prove_bounded(11, 2024, params_small, random.Random(3))


def test_bounded_range_chosen_challenge(params_small):

    # every digit equation holds, but the challenge was not derived by hashing
    E = EllipticCurve(params_small.curve)
    C = Pedersen(params_small.H, params_small.curve).commit(300, 4242)
    c, zr = 11, 22

    D = C * c + params_small.H * zr
    digits = []
    for i in range(params_small.l):
        V = E.G2() * (99 + i)
        zsig, zv = 33 + i, 44 + i
        a = E.pairing(params_small.public_key * c - E.G1() * zsig, V) * E.base_pairing() ** zv
        D = D + E.G2() * (zsig * params_small.u**i)
        digits.append(DigitProof(V=V, a=a, zsig=zsig, zv=zv))

    forged = BoundedRangeProof(digits=tuple(digits), D=D, C=C, c=c, zr=zr)

    assert not verify_bounded(forged, params_small)


def test_prove_bounded_malformed_parameters(params_small):

    with pytest.raises(MalformedProofError):
        prove_bounded(3, 4242, None)

    set_params = setup_set({1, 2})
    with pytest.raises(MalformedProofError):
        prove_bounded(1, 4242, set_params)
