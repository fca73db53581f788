from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from gepetto.config import (
    Keypair,
    ProjectConfig,
    b58encode,
    current_year,
    generate_program_name_variants,
)

ALPHABET = set("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")

SAMPLES = [
    b"",
    b"\0",
    b"\0\0\0",
    b"\x01",
    b"\xff",
    b"\0\x01\x02",
    b"hello world",
    bytes(range(32)),
    bytes(range(255, 191, -1)),
    b"\0\0" + bytes(range(1, 40)),
]


def test_b58_all_zero_pubkey():
    assert b58encode(bytes(32)) == "1" * 32


def test_b58_empty():
    assert b58encode(b"") == ""


@pytest.mark.parametrize(
    "data, expected",
    [
        (bytes.fromhex("61"), "2g"),
        (bytes.fromhex("626262"), "a3gV"),
        (bytes.fromhex("636363"), "aPEr"),
        (b"hello world", "StV1DL6CwTryKyV"),
    ],
)
def test_b58_known_values(data, expected):
    assert b58encode(data) == expected


@pytest.mark.parametrize("data", SAMPLES)
def test_b58_alphabet_and_leading_zeros(data):
    encoded = b58encode(data)
    assert set(encoded) <= ALPHABET
    zeros = len(data) - len(data.lstrip(b"\0"))
    ones = len(encoded) - len(encoded.lstrip("1"))
    assert zeros == ones


@pytest.mark.parametrize(
    "a, b",
    [
        (b"\x01", b"\x02"),
        (b"\x01\x00", b"\x01\x01"),
        (b"\x10\x20\x30", b"\x10\x20\x31"),
        (b"\x7f" * 8, b"\x80" + b"\x00" * 7),
        (b"\x01" + bytes(31), b"\xff" * 32),
    ],
)
def test_b58_preserves_order_for_equal_length(a, b):
    ea, eb = b58encode(a), b58encode(b)
    assert (len(ea), ea) < (len(eb), eb)


def test_keypair_known_vector():
    seed = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
    keypair = Keypair(seed)
    assert keypair.pubkey().hex() == (
        "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
    )
    assert keypair.to_bytes()[:32] == seed


def test_keypair_layout():
    keypair = Keypair.generate()
    raw = keypair.to_bytes()
    assert len(raw) == 64
    assert raw[32:] == keypair.pubkey()
    assert Keypair(raw[:32]).pubkey() == keypair.pubkey()


def test_keypairs_differ():
    pubkeys = {Keypair.generate().pubkey() for _ in range(5)}
    assert len(pubkeys) == 5
    assert all(len(pubkey) == 32 for pubkey in pubkeys)


def test_keypair_rejects_bad_seed():
    with pytest.raises(ValueError):
        Keypair(b"short")


def test_name_variants():
    assert generate_program_name_variants("some-counter") == ("some_counter", "Some Counter")


def test_name_variants_empty_words():
    underscore, readable = generate_program_name_variants("a--b")
    assert underscore == "a__b"
    assert readable.split(" ") == ["A", "", "B"]


def test_current_year_matches_clock():
    assert current_year() == datetime.now(timezone.utc).year


def test_build_with_name():
    with patch("click.prompt", return_value="Acme") as prompt:
        config = ProjectConfig.build("some-counter")
    assert prompt.call_count == 1
    assert config.program_name_dash == "some-counter"
    assert config.program_name_underscore == "some_counter"
    assert config.company_name == "Acme"
    assert config.year == current_year()
    assert config.program_pubkey == b58encode(config.program_keypair.pubkey())


def test_build_prompts_for_name():
    with patch("click.prompt", side_effect=["my-prog", "Acme"]):
        config = ProjectConfig.build(None)
    assert config.program_name_dash == "my-prog"
    assert config.program_name_readable == generate_program_name_variants("my-prog")[1]