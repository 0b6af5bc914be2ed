import random
import time

from zkrange import CCS08


def run(b, u, crv):

    time_results = []

    zkrp = CCS08(crv)

    start = time.time()
    zkrp.setup(0, b, u)
    end = time.time()
    time_results.append(end - start)

    x = random.randint(0, b)
    r = random.randint(1, zkrp.order - 1)

    start = time.time()
    proof = zkrp.prove(x, r)
    end = time.time()
    time_results.append(end - start)

    start = time.time()
    assert zkrp.verify(proof)
    end = time.time()
    time_results.append(end - start)

    return zkrp.params.l, time_results


if __name__ == "__main__":

    for crv in ["BN254", "BLS12_381"]:
        for b, u in [(2**8, 16), (2**16, 16), (2**32, 100)]:
            l, results = run(b, u, crv)
            print(
                f"{crv} b=2^{b.bit_length() - 1} u={u} l={l}: "
                f"setup {results[0]:.2f}s, prove {results[1]:.2f}s, verify {results[2]:.2f}s"
            )
