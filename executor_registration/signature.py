"""
Signature helpers.

Signers such as the vault ethereum plugin return the recovery id as 0/1,
while the registry recovers with the Ethereum convention 27/28.
"""

import string

# "0x" + r (32 bytes) + s (32 bytes) + v (1 byte), hex encoded
SIGNATURE_HEX_LENGTH = 132


class SignatureLengthError(ValueError):
    pass


class SignatureFormatError(ValueError):
    pass


def adjust_signature_v(signature: str) -> str:
    """
    Return the signature with its recovery id moved from 0/1 to 27/28.

    Any other v value, including 27 and 28, is returned unchanged.
    """
    if len(signature) != SIGNATURE_HEX_LENGTH:
        raise SignatureLengthError(
            f"Invalid signature length. Expected {SIGNATURE_HEX_LENGTH} characters (0x + 65 bytes), "
            f"got {len(signature)}"
        )

    if not all(c in string.hexdigits for c in signature[-2:]):
        raise SignatureFormatError(f"Invalid signature recovery id {signature[-2:]!r}, expected a hex byte")

    v = int(signature[-2:], 16)

    if v in (0, 1):
        v += 27
        signature = signature[:-2] + format(v, '02x')

    return signature
