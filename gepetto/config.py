"""Project configuration: names, year and the program keypair."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timezone

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from gepetto.prompts import collect_user_input

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def b58encode(data: bytes) -> str:
    """Encode bytes in base58 with the Bitcoin alphabet."""
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_B58_ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(digits))


class Keypair:
    """An ed25519 keypair in the layout used for program ids."""

    SEED_LENGTH = 32

    def __init__(self, seed: bytes) -> None:
        if len(seed) != self.SEED_LENGTH:
            raise ValueError(f"seed must be {self.SEED_LENGTH} bytes, got {len(seed)}")
        self._seed = bytes(seed)
        self._private_key = Ed25519PrivateKey.from_private_bytes(self._seed)

    @classmethod
    def generate(cls) -> Keypair:
        """Create a keypair from a fresh random seed."""
        return cls(secrets.token_bytes(cls.SEED_LENGTH))

    def pubkey(self) -> bytes:
        """Return the 32-byte public key."""
        return self._private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def to_bytes(self) -> bytes:
        """Return the 64-byte form: secret seed followed by public key."""
        return self._seed + self.pubkey()

    def __repr__(self) -> str:
        return f"Keypair(pubkey={b58encode(self.pubkey())!r})"


def generate_program_name_variants(program_name_dash: str) -> tuple[str, str]:
    """Return (underscore_name, readable_name) for a dash-separated name."""
    underscore = program_name_dash.replace("-", "_")
    readable = " ".join(word[:1].upper() + word[1:] for word in program_name_dash.split("-"))
    return underscore, readable


def current_year() -> int:
    """Return the current year in UTC."""
    return datetime.now(timezone.utc).year


@dataclass(frozen=True)
class ProjectConfig:
    """Everything needed to render a new project."""

    program_name_dash: str
    program_name_underscore: str
    program_name_readable: str
    company_name: str
    year: int
    program_pubkey: str
    program_keypair: Keypair

    @classmethod
    def build(cls, package_name: str | None = None) -> ProjectConfig:
        """Build the configuration, prompting the user for missing data."""
        program_name_dash, company_name = collect_user_input(package_name)
        underscore, readable = generate_program_name_variants(program_name_dash)
        keypair = Keypair.generate()
        return cls(
            program_name_dash=program_name_dash,
            program_name_underscore=underscore,
            program_name_readable=readable,
            company_name=company_name,
            year=current_year(),
            program_pubkey=b58encode(keypair.pubkey()),
            program_keypair=keypair,
        )