import os
import random
import time

from structlog import get_logger

from .errors import DecompositionError, PrimitiveError

logger = get_logger()


def get_random_int(n_max, rng=None):
    """Get random integer in [1, n_max] range"""
    rand = rng or random.SystemRandom()
    try:
        return rand.randint(1, n_max)
    except (OSError, NotImplementedError) as exc:
        raise PrimitiveError("Random source failed") from exc


def get_n_jobs():
    """Get number of jobs used for per-digit parallelism"""
    check_env = os.environ.get("ZKRANGE_PARALLEL_CPU")
    if check_env:
        return int(check_env)
    else:
        return 1


def decompose(x: int, u: int, l: int) -> list[int]:
    """
    Decompose `x` into `l` little-endian digits in base `u`,
    that is `x = sum(digits[i] * u**i)`
    """
    if x < 0 or x >= u**l:
        raise DecompositionError(f"Value does not fit in {l} digits of base {u}")

    digits = []
    for _ in range(l):
        x, d = divmod(x, u)
        digits.append(d)

    return digits


def recompose(digits: list, u: int) -> int:
    """Inverse of `decompose`"""
    return sum(d * u**i for i, d in enumerate(digits))


def count_digits(n: int, u: int) -> int:
    """Number of base `u` digits needed so that `u**l > n`"""
    l = 0
    while n > 0:
        n //= u
        l += 1
    return l


class Timer:
    def __init__(self, name):
        self.start_time = 0
        self.end_time = 0
        self.name = name
        self.elapsed = 0

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.time()
        self.elapsed = self.end_time - self.start_time
        logger.debug("timer", name=self.name, elapsed=round(self.elapsed, 3))
