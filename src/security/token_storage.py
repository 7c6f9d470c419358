"""Hadoop token storage codec.

This module reads and writes the Writable token storage format used
for ``HADOOP_TOKEN_FILE_LOCATION`` files: the ``HDTS`` magic, a format
version byte, then variable-length encoded tokens and secret keys.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import BinaryIO

from core.constants import (
    TOKEN_STORAGE_MAGIC,
    TOKEN_STORAGE_PROTOBUF_VERSION,
    TOKEN_STORAGE_WRITABLE_VERSION,
)
from core.errors import CredentialFormatError
from security.credentials import Credentials, SecurityToken


def read_token_file(token_file: Path) -> Credentials:
    """Read credentials from a token storage file.

    Args:
        token_file: Path of the token storage file.

    Returns:
        Parsed credentials.

    Raises:
        CredentialFormatError: If the file cannot be read or parsed.
    """
    try:
        payload = token_file.read_bytes()
    except OSError as error:
        raise CredentialFormatError(
            f"Failed to read token storage file {token_file}: {error}."
        ) from error
    return read_token_storage(payload)


def read_token_storage(payload: bytes) -> Credentials:
    """Decode Writable-format token storage bytes.

    Raises:
        CredentialFormatError: For bad magic, unsupported versions,
            or truncated content.
    """
    stream = io.BytesIO(payload)
    magic = stream.read(len(TOKEN_STORAGE_MAGIC))
    if magic != TOKEN_STORAGE_MAGIC:
        raise CredentialFormatError("Bad header found in token storage: missing HDTS magic.")
    version = _read_exact(stream, 1)[0]
    if version == TOKEN_STORAGE_PROTOBUF_VERSION:
        raise CredentialFormatError(
            "Protobuf token storage is not supported. "
            "Write the token file in the Writable format (version 0)."
        )
    if version != TOKEN_STORAGE_WRITABLE_VERSION:
        raise CredentialFormatError(f"Unknown token storage version: {version}.")
    tokens: dict[str, SecurityToken] = {}
    for _ in range(_read_count(stream)):
        alias = _read_text(stream)
        tokens[alias] = _read_token(stream)
    secret_keys: dict[str, bytes] = {}
    for _ in range(_read_count(stream)):
        alias = _read_text(stream)
        secret_keys[alias] = _read_bytes(stream)
    return Credentials(tokens=tokens, secret_keys=secret_keys)


def write_token_storage(credentials: Credentials) -> bytes:
    """Encode credentials in the Writable token storage format."""
    stream = io.BytesIO()
    stream.write(TOKEN_STORAGE_MAGIC)
    stream.write(bytes([TOKEN_STORAGE_WRITABLE_VERSION]))
    write_vlong(stream, len(credentials.tokens))
    for alias, token in credentials.tokens.items():
        _write_text(stream, alias)
        _write_bytes(stream, token.identifier)
        _write_bytes(stream, token.password)
        _write_text(stream, token.kind)
        _write_text(stream, token.service)
    write_vlong(stream, len(credentials.secret_keys))
    for alias, secret in credentials.secret_keys.items():
        _write_text(stream, alias)
        _write_bytes(stream, secret)
    return stream.getvalue()


def read_vlong(stream: BinaryIO) -> int:
    """Read one Hadoop zero-compressed variable-length long."""
    first_byte = _signed(_read_exact(stream, 1)[0])
    if first_byte >= -112:
        return first_byte
    size = -119 - first_byte if first_byte < -120 else -111 - first_byte
    value = 0
    for byte in _read_exact(stream, size - 1):
        value = (value << 8) | byte
    is_negative = first_byte < -120
    return ~value if is_negative else value


def write_vlong(stream: BinaryIO, value: int) -> None:
    """Write one Hadoop zero-compressed variable-length long."""
    if -112 <= value <= 127:
        stream.write(bytes([value & 0xFF]))
        return
    marker = -112
    if value < 0:
        value = ~value
        marker = -120
    remaining = value
    while remaining != 0:
        remaining >>= 8
        marker -= 1
    stream.write(bytes([marker & 0xFF]))
    size = -(marker + 120) if marker < -120 else -(marker + 112)
    for index in range(size, 0, -1):
        stream.write(bytes([(value >> ((index - 1) * 8)) & 0xFF]))


def _read_token(stream: BinaryIO) -> SecurityToken:
    identifier = _read_bytes(stream)
    password = _read_bytes(stream)
    kind = _read_text(stream)
    service = _read_text(stream)
    return SecurityToken(identifier=identifier, password=password, kind=kind, service=service)


def _read_count(stream: BinaryIO) -> int:
    count = read_vlong(stream)
    if count < 0:
        raise CredentialFormatError(f"Negative entry count in token storage: {count}.")
    return count


def _read_bytes(stream: BinaryIO) -> bytes:
    return _read_exact(stream, _read_count(stream))


def _read_text(stream: BinaryIO) -> str:
    raw_text = _read_bytes(stream)
    try:
        return raw_text.decode("utf-8")
    except UnicodeDecodeError as error:
        raise CredentialFormatError("Token storage contains invalid UTF-8 text.") from error


def _write_bytes(stream: BinaryIO, payload: bytes) -> None:
    write_vlong(stream, len(payload))
    stream.write(payload)


def _write_text(stream: BinaryIO, text: str) -> None:
    _write_bytes(stream, text.encode("utf-8"))


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise CredentialFormatError("Unexpected end of token storage data.")
    return chunk


def _signed(byte: int) -> int:
    return byte - 256 if byte > 127 else byte
