import dataclasses
import random

import pytest

from zkrange import (
    DomainError,
    MalformedProofError,
    SetMembershipProof,
    SetParameters,
    TrustedSetup,
    check_signatures,
    prove_set,
    setup_bounded,
    setup_set,
    verify_set,
)
from zkrange.commitment import Pedersen
from zkrange.ecc import EllipticCurve


@pytest.fixture(scope="module")
def params():
    return setup_set({3, 7, 9}, rng=random.Random(1337))


@pytest.fixture(scope="module")
def proof(params):
    return prove_set(7, 12345, params, random.Random(42))


def test_set_membership(params, proof):

    assert verify_set(proof, params)

    # fresh randomness every call
    other = prove_set(7, 12345, params)
    assert verify_set(other, params)
    assert other.D != proof.D


def test_set_membership_all_elements(params):

    for x in (3, 9):
        assert verify_set(prove_set(x, random.randint(1, 2**128), params), params)


def test_set_membership_not_in_set(params):

    with pytest.raises(DomainError):
        prove_set(5, 12345, params)


def test_set_membership_tampered(params, proof):

    E = EllipticCurve(params.curve)
    q = E.order

    tampered = [
        dataclasses.replace(proof, c=(proof.c + 1) % q),
        dataclasses.replace(proof, zr=(proof.zr + 1) % q),
        dataclasses.replace(proof, zsig=(proof.zsig + 1) % q),
        dataclasses.replace(proof, zv=(proof.zv + 1) % q),
        dataclasses.replace(proof, V=proof.V * 2),
        dataclasses.replace(proof, D=proof.D + E.G2()),
        dataclasses.replace(proof, C=proof.C + E.G2()),
        dataclasses.replace(proof, c=proof.c + q),
        dataclasses.replace(proof, zr=proof.zr + q),
        dataclasses.replace(proof, zsig=proof.zsig + q),
        dataclasses.replace(proof, zv=proof.zv + q),
        dataclasses.replace(proof, zr=-1),
        dataclasses.replace(proof, a=proof.a * E.base_pairing()),
    ]

    for p in tampered:
        assert not verify_set(p, params)


def test_set_membership_other_parameters(params, proof):

    # same set, different signing key
    other_params = setup_set({3, 7, 9})
    assert not verify_set(proof, other_params)


def test_set_membership_malformed(params, proof):

    with pytest.raises(MalformedProofError):
        verify_set(None, params)

    with pytest.raises(MalformedProofError):
        verify_set(proof, None)

    with pytest.raises(MalformedProofError):
        verify_set("proof", params)


def test_set_membership_deterministic_rng(params):

    p1 = prove_set(3, 99, params, random.Random(5))
    p2 = prove_set(3, 99, params, random.Random(5))

    assert p1 == p2


def test_parameters_hide_signing_key():

    trusted_setup = TrustedSetup(rng=random.Random(7))
    params = trusted_setup.setup_set([1, 2, 3])

    field_names = {f.name for f in dataclasses.fields(params)}
    assert field_names == {"signatures", "H", "public_key", "curve"}

    values = [getattr(params, name) for name in field_names]
    assert trusted_setup.keypair.secret_key not in values
    assert params.public_key == trusted_setup.keypair.public_key


def test_parameters_are_immutable(params):

    with pytest.raises(dataclasses.FrozenInstanceError):
        params.H = params.public_key

    with pytest.raises(TypeError):
        params.signatures[5] = params.signatures[7]


def test_check_signatures(params):

    assert check_signatures(params)

    forged = dict(params.signatures)
    forged[5] = forged[7]
    forged_params = SetParameters(forged, params.H, params.public_key, params.curve)

    assert not check_signatures(forged_params)


def test_set_membership_bls12_381():

    params = setup_set([10, 20], curve="BLS12_381")
    proof = prove_set(20, 777, params)

    assert verify_set(proof, params)


def test_set_membership_chosen_challenge(params):

    # responses picked before the challenge satisfy both verification
    # equations, but the challenge is not the hash of (a, D)
    E = EllipticCurve(params.curve)
    C = Pedersen(params.H, params.curve).commit(5, 12345)
    V = E.G2() * 99
    c, zr, zsig, zv = 11, 22, 33, 44

    D = C * c + params.H * zr + E.G2() * zsig
    a = E.pairing(params.public_key * c - E.G1() * zsig, V) * E.base_pairing() ** zv

    forged = SetMembershipProof(V=V, D=D, C=C, a=a, c=c, zr=zr, zsig=zsig, zv=zv)

    assert not verify_set(forged, params)


def test_prove_set_malformed_parameters(params):

    with pytest.raises(MalformedProofError):
        prove_set(7, 12345, None)

    bounded = setup_bounded(2, 2)
    with pytest.raises(MalformedProofError):
        prove_set(1, 12345, bounded)
