# xaesgcm

XAES-256-GCM authenticated encryption for Python.

XAES-256-GCM extends AES-256-GCM with a 192-bit (24-byte) nonce. For each
message, a fresh AES-256-GCM key is derived from the main key and the first
12 bytes of the nonce. The last 12 bytes of the nonce are then used as the
AES-256-GCM nonce.

## Installation

```
pip install xaesgcm
```

The package depends on `cryptography`, which supplies the AES block cipher
and AES-GCM.

## Usage

Everything lives in the `xaesgcm.cipher` module.

```python
from xaesgcm.cipher import Xaes256Gcm, AeadError

key = Xaes256Gcm.generate_key()        # 32 random bytes from os.urandom
cipher = Xaes256Gcm(key)

nonce = Xaes256Gcm.generate_nonce()    # 24 random bytes from os.urandom
sealed = cipher.encrypt(nonce, b"plaintext message", b"header")

assert cipher.decrypt(nonce, sealed, b"header") == b"plaintext message"

try:
    cipher.decrypt(nonce, sealed, b"wrong header")
except AeadError:
    print("authentication failed")
```

The associated data argument is optional and defaults to `b""`.

`encrypt` returns the ciphertext followed by the 16-byte tag. `decrypt`
expects that same layout. The detached forms keep the tag separate:

```python
ciphertext, tag = cipher.encrypt_detached(nonce, b"message")
plaintext = cipher.decrypt_detached(nonce, ciphertext, tag)
```

`derive_key(nonce)` returns the 32-byte AES-256-GCM key that a given 24-byte
nonce selects. Only the first 12 bytes of the nonce affect the key.

## Sizes and limits

The module exports these constants:

| Constant     | Meaning                         | Value       |
|--------------|---------------------------------|-------------|
| `KEY_SIZE`   | key length                      | 32          |
| `NONCE_SIZE` | nonce length                    | 24          |
| `TAG_SIZE`   | tag length                      | 16          |
| `BLOCK_SIZE` | AES block length                | 16          |
| `P_MAX`      | longest plaintext               | 2^36        |
| `A_MAX`      | longest associated data         | 2^36        |
| `C_MAX`      | longest ciphertext (without tag)| 2^36 + 16   |

## Errors

`AeadError` is raised in these cases:

- authentication fails;
- an input is longer than the limits above;
- the data given to `decrypt` is shorter than a tag.

`ValueError` is raised for a key, nonce or tag of the wrong length.

## Scope

This is a library only. It has no command-line tool. It works on whole
messages held in memory and offers no streaming interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```