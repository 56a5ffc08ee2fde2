"""XAES-256-GCM: AES-256-GCM with 192-bit nonces via per-nonce key derivation."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

__all__ = [
    "A_MAX",
    "AeadError",
    "BLOCK_SIZE",
    "C_MAX",
    "KEY_SIZE",
    "NONCE_SIZE",
    "P_MAX",
    "TAG_SIZE",
    "Xaes256Gcm",
]

KEY_SIZE = 32
NONCE_SIZE = 24
TAG_SIZE = 16
BLOCK_SIZE = 16

#: Maximum length of plaintext.
P_MAX = 1 << 36
#: Maximum length of associated data.
A_MAX = 1 << 36
#: Maximum length of ciphertext.
C_MAX = (1 << 36) + 16

_HALF_NONCE = NONCE_SIZE // 2
_BLOCK_MASK = (1 << (8 * BLOCK_SIZE)) - 1
_REDUCTION = 0b10000111


class AeadError(Exception):
    """Raised when encryption or decryption fails."""

    def __init__(self, message: str = "aead error") -> None:
        super().__init__(message)


def _check_length(value: bytes, size: int, what: str) -> bytes:
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(data)}")
    return data


class Xaes256Gcm:
    """XAES-256-GCM authenticated cipher keyed with a 256-bit key."""

    def __init__(self, key: bytes) -> None:
        key = _check_length(key, KEY_SIZE, "key")
        self._encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()

        # L = AES-256_K(0^128); K1 = L << 1, reduced by 0x87 when MSB(L) is set.
        block = int.from_bytes(self._encrypt_block(bytes(BLOCK_SIZE)), "big")
        shifted = (block << 1) & _BLOCK_MASK
        if block >> (8 * BLOCK_SIZE - 1):
            shifted ^= _REDUCTION
        self._k1 = shifted.to_bytes(BLOCK_SIZE, "big")

    def _encrypt_block(self, block: bytes) -> bytes:
        return self._encryptor.update(block)

    @staticmethod
    def generate_key() -> bytes:
        """Return a random 32-byte key."""
        return os.urandom(KEY_SIZE)

    @staticmethod
    def generate_nonce() -> bytes:
        """Return a random 24-byte nonce."""
        return os.urandom(NONCE_SIZE)

    def derive_key(self, nonce: bytes) -> bytes:
        """Return the AES-256-GCM key derived from the first half of a 24-byte nonce."""
        nonce = _check_length(nonce, NONCE_SIZE, "nonce")
        n1 = nonce[:_HALF_NONCE]
        m1 = b"\x00\x01X\x00" + n1
        m2 = b"\x00\x02X\x00" + n1
        km = self._encrypt_block(bytes(a ^ b for a, b in zip(m1, self._k1)))
        kn = self._encrypt_block(bytes(a ^ b for a, b in zip(m2, self._k1)))
        return km + kn

    def _gcm_for(self, nonce: bytes) -> tuple[AESGCM, bytes]:
        nonce = _check_length(nonce, NONCE_SIZE, "nonce")
        return AESGCM(self.derive_key(nonce)), nonce[_HALF_NONCE:]

    def encrypt_detached(
        self, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
    ) -> tuple[bytes, bytes]:
        """Encrypt and return ``(ciphertext, tag)``."""
        if len(plaintext) > P_MAX or len(associated_data) > A_MAX:
            raise AeadError("input too long")
        gcm, inner_nonce = self._gcm_for(nonce)
        sealed = gcm.encrypt(inner_nonce, bytes(plaintext), bytes(associated_data))
        return sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]

    def decrypt_detached(
        self,
        nonce: bytes,
        ciphertext: bytes,
        tag: bytes,
        associated_data: bytes = b"",
    ) -> bytes:
        """Verify ``tag`` and return the plaintext; raise AeadError on failure."""
        if len(ciphertext) > C_MAX or len(associated_data) > A_MAX:
            raise AeadError("input too long")
        tag = _check_length(tag, TAG_SIZE, "tag")
        gcm, inner_nonce = self._gcm_for(nonce)
        try:
            return gcm.decrypt(
                inner_nonce, bytes(ciphertext) + tag, bytes(associated_data)
            )
        except InvalidTag as exc:
            raise AeadError("authentication failed") from exc

    def encrypt(
        self, nonce: bytes, plaintext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Encrypt and return ciphertext with the tag appended."""
        ciphertext, tag = self.encrypt_detached(nonce, plaintext, associated_data)
        return ciphertext + tag

    def decrypt(
        self, nonce: bytes, ciphertext: bytes, associated_data: bytes = b""
    ) -> bytes:
        """Decrypt ciphertext that carries its tag at the end."""
        data = bytes(ciphertext)
        if len(data) < TAG_SIZE:
            raise AeadError("ciphertext shorter than tag")
        return self.decrypt_detached(
            nonce, data[:-TAG_SIZE], data[-TAG_SIZE:], associated_data
        )