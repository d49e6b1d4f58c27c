"""base64url helpers shared by token and JWK encoding."""

import base64


def b64(data: bytes | str) -> str:
    """Encode bytes (or UTF-8 text) as base64url without padding."""
    if isinstance(data, str):
        data = data.encode()
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode()


def int_to_base64url(value: int) -> str:
    """Encode an integer as base64url without padding."""
    byte_length = max((value.bit_length() + 7) // 8, 1)
    raw = value.to_bytes(byte_length, byteorder="big")
    return b64(raw)


def base64url_to_int(value: str) -> int:
    """Decode a base64url big-endian integer, padded or not."""
    padded = value + "=" * (-len(value) % 4)
    return int.from_bytes(base64.urlsafe_b64decode(padded), byteorder="big")
