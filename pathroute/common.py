"""Addresses, edge identifiers and their text and base58 forms."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable

ADDR_LEN = 20
EDGE_ID_LEN = 40

_ALPHABET = "".join(
    char
    for char in string.digits + string.ascii_uppercase + string.ascii_lowercase
    if char not in "0OIl"
)
_ALPHABET_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_BYTE_PATTERN = re.compile(r"[ \[]*([0-9]*)")


def _checked(cls_name: str, data: bytes | None, size: int) -> bytes:
    if data is None:
        return bytes(size)
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{cls_name} needs exactly {size} bytes, got {len(data)}")
    return data


def _format_byte_list(data: bytes) -> str:
    return "[" + " ".join(str(value) for value in data) + "]"


def _parse_byte_list(text: str | bytes, count: int, kind: str) -> bytes:
    """Parse the "[n n n ...]" form; the first character is skipped unread."""
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    body = text[1:]
    pos = 0
    values = []
    for _ in range(count):
        match = _BYTE_PATTERN.match(body, pos)
        digits = match.group(1)
        pos = match.end()
        if not digits or pos >= len(body) or int(digits) > 255:
            raise ValueError(f"{kind} text unmarshal error")
        values.append(int(digits))
    return bytes(values)


class Address(bytes):
    """A 20-byte node address."""

    def __new__(cls, data: bytes | None = None) -> Address:
        return super().__new__(cls, _checked(cls.__name__, data, ADDR_LEN))

    def __repr__(self) -> str:
        return f"Address({bytes(self)!r})"

    def to_text(self) -> str:
        """Return the address as "[b0 b1 ... b19]"."""
        return _format_byte_list(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> Address:
        """Parse the form produced by to_text."""
        return cls(_parse_byte_list(text, ADDR_LEN, "Address"))


class EdgeId(bytes):
    """A 40-byte edge identifier: the source address followed by the target address."""

    def __new__(cls, data: bytes | None = None) -> EdgeId:
        return super().__new__(cls, _checked(cls.__name__, data, EDGE_ID_LEN))

    def __repr__(self) -> str:
        return f"EdgeId({bytes(self)!r})"

    @classmethod
    def from_addresses(cls, addr1: Address, addr2: Address) -> EdgeId:
        """Build the identifier of the edge addr1 -> addr2."""
        return cls(bytes(Address(addr1)) + bytes(Address(addr2)))

    def addr1(self) -> Address:
        """The address the edge starts at."""
        return Address(self[:ADDR_LEN])

    def addr2(self) -> Address:
        """The address the edge ends at."""
        return Address(self[ADDR_LEN:])

    def to_text(self) -> str:
        """Return the identifier as "[b0 b1 ... b39]"."""
        return _format_byte_list(self)

    @classmethod
    def from_text(cls, text: str | bytes) -> EdgeId:
        """Parse the form produced by to_text."""
        return cls(_parse_byte_list(text, EDGE_ID_LEN, "EdgeId"))


def address_contains(addrs: Iterable[Address] | None, address: Address) -> bool:
    """Tell whether address is among addrs; None holds nothing."""
    if addrs is None:
        return False
    return any(addr == address for addr in addrs)


def b58encode(data: bytes) -> str:
    """Encode bytes with the Bitcoin base58 alphabet."""
    data = bytes(data)
    stripped = data.lstrip(b"\0")
    zeros = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, rem = divmod(number, 58)
        digits.append(_ALPHABET[rem])
    return _ALPHABET[0] * zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode a Bitcoin base58 string; raise ValueError when it is not one."""
    if not text:
        raise ValueError("zero length string")
    number = 0
    for char in text:
        try:
            number = number * 58 + _ALPHABET_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    zeros = len(text) - len(text.lstrip(_ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * zeros + body


def to_base58(address: Address) -> str:
    """Encode an address as base58."""
    return b58encode(address)


def from_base58(text: str) -> Address:
    """Decode base58 into an address, keeping the first 20 bytes and zero-filling the rest."""
    decoded = b58decode(text)[:ADDR_LEN]
    return Address(decoded.ljust(ADDR_LEN, b"\0"))