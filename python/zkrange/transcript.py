import hashlib
from .ecc import ispointG1, ispointG2, isgt


class FiatShamirTranscript:

    def __init__(self, label: bytes, field: int, alg="sha256"):
        self.alg = alg
        self.label = label
        self.field = field
        self.hasher = hashlib.new(alg, label)

    def append(self, data):

        if isinstance(data, bytes):
            self.hasher.update(data)
        elif isinstance(data, str):
            self.hasher.update(data.encode())
        elif isinstance(data, int):
            self.hasher.update((data % self.field).to_bytes(32, "big"))
        elif ispointG1(data) or ispointG2(data) or isgt(data):
            self.hasher.update(data.to_bytes())
        elif isinstance(data, (list, tuple)):
            for d in data:
                self.append(d)
        else:
            raise TypeError(f"Type of {type(data)} is not supported as transcript")

    def get_challenge(self) -> bytes:
        digest = self.hasher.digest()
        return digest

    def get_challenge_scalar(self) -> int:
        return int.from_bytes(self.get_challenge(), "big") % self.field
