import pytest

from primeshare import CorruptShare, InvalidEncodedShare, Share, combine, split
from primeshare.encoding import decode_share, decode_shares, encode_share, encode_shares


def test_encode_share_format():
    assert encode_share(Share(7, b"\xab\x01")) == "7:ab01"
    assert encode_share(Share(255, b"\x00\xff")) == "255:00ff"


def test_round_trip(secret, five_of_three):
    encoded = encode_shares(five_of_three)
    assert all(line == line.lower() for line in encoded)
    decoded = decode_shares(encoded)
    assert decoded == five_of_three
    assert combine(decoded[2:], 3) == secret


def test_empty_collections():
    assert encode_shares([]) == []
    assert decode_shares([]) == []


def test_uppercase_hex_is_accepted():
    assert decode_share("12:ABcd") == Share(12, b"\xab\xcd")


@pytest.mark.parametrize(
    "text",
    [
        "123abc",
        "256:ab",
        "0:ab",
        "1:zz",
        "",
        "1:",
        ":ab",
        "1:abc",
        "+1:ab",
        " 1:ab",
        "1:ab cd",
        "x1:ab",
        "١:ab",
        "9" * 5000 + ":ab",
        "0256:ab",
        "000:ab",
    ],
)
def test_malformed_strings(text):
    with pytest.raises(InvalidEncodedShare):
        decode_share(text)


def test_decode_error_names_position():
    with pytest.raises(InvalidEncodedShare) as exc:
        decode_shares(["1:abcd", "2:abcd", "nope"])
    assert exc.value.share_position == 2
    assert exc.value.text == "nope"
    assert isinstance(exc.value, CorruptShare)


def test_split_on_first_colon_only():
    with pytest.raises(InvalidEncodedShare):
        decode_share("1:ab:cd")


def test_encoded_shares_from_small_split():
    shares = split(b"abc", 3, 2)
    decoded = decode_shares(encode_shares(shares))
    assert combine(decoded[:2], 2) == b"abc"


def test_leading_zeros_in_index():
    assert decode_share("00255:ab") == Share(255, b"\xab")
    assert decode_share("007:00ff").index == 7


def test_very_long_index_reports_invalid_share():
    with pytest.raises(InvalidEncodedShare) as exc:
        decode_shares(["1:ab", "1" * 5000 + ":ab"])
    assert exc.value.share_position == 1
