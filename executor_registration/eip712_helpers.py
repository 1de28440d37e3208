"""
EIP712 Helper Functions for Executor Registration
This module builds the typed data for RegisterExecutor and SafeMessage and
computes their EIP712 digests.
"""

from typing import Any, Dict, List, Optional

from eth_account.messages import encode_typed_data
from eth_utils import encode_hex, is_0x_prefixed, keccak, to_bytes

from .config import ExecutorConfig
from .eip712_config import (
    REGISTER_EXECUTOR_FIELDS,
    REGISTER_EXECUTOR_PRIMARY_TYPE,
    SAFE_MESSAGE_FIELDS,
    SAFE_MESSAGE_PRIMARY_TYPE,
    SIGN_COMMAND_TEMPLATE,
)


class TypedDataHasher:
    """Hashes (domain, types, message) into a 32 byte EIP712 digest."""

    def hash(self, domain: Dict[str, Any], types: Dict[str, List[Dict[str, str]]],
             message: Dict[str, Any]) -> bytes:
        raise NotImplementedError


class Eip712Hasher(TypedDataHasher):
    """Standard EIP712 hashing backed by eth_account."""

    def hash(self, domain, types, message):
        signable = encode_typed_data(domain, types, message)
        # header is the domain separator, body is the struct hash
        return get_eip712_digest(signable.header, signable.body)


def get_eip712_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Compute the EIP712 digest"""
    return keccak(b'\x19\x01' + domain_separator + struct_hash)


def build_executor_typed_data(config: ExecutorConfig) -> Dict[str, Any]:
    """Typed data for the RegisterExecutor struct, fields in schema order."""
    return {
        "domain": {
            "chainId": config.chain_id,
        },
        "message": {
            "timestamp": config.timestamp,
            "executor": config.executor,
            "inputTokens": list(config.input_tokens),
            "hopAddresses": list(config.hop_addresses),
            "feeInBPS": config.fee_in_bps,
            "feeToken": config.fee_token,
            "feeReceiver": config.fee_receiver,
            "limitPerExecution": config.limit_per_execution,
            "clientId": config.client_id,
        },
        "primaryType": REGISTER_EXECUTOR_PRIMARY_TYPE,
        "types": {
            REGISTER_EXECUTOR_PRIMARY_TYPE: [dict(f) for f in REGISTER_EXECUTOR_FIELDS],
        },
    }


def hash_typed_data(typed_data: Dict[str, Any], hasher: Optional[TypedDataHasher] = None) -> str:
    hasher = hasher or Eip712Hasher()
    digest = hasher.hash(typed_data["domain"], typed_data["types"], typed_data["message"])
    return encode_hex(digest)


def get_executor_digest(config: ExecutorConfig, hasher: Optional[TypedDataHasher] = None) -> str:
    """0x-prefixed RegisterExecutor digest for the given config"""
    return hash_typed_data(build_executor_typed_data(config), hasher)


def build_safe_message_typed_data(message, chain_id: int, safe_address: str) -> Dict[str, Any]:
    # A 0x hex string is the digest being wrapped, hash it as raw bytes
    if isinstance(message, str) and is_0x_prefixed(message):
        message = to_bytes(hexstr=message)
    return {
        "domain": {
            "chainId": chain_id,
            "verifyingContract": safe_address,
        },
        "message": {
            "message": message,
        },
        "primaryType": SAFE_MESSAGE_PRIMARY_TYPE,
        "types": {
            SAFE_MESSAGE_PRIMARY_TYPE: [dict(f) for f in SAFE_MESSAGE_FIELDS],
        },
    }


def get_safe_message_digest(message, chain_id: int, safe_address: str,
                            hasher: Optional[TypedDataHasher] = None) -> str:
    """
    Digest a Safe owner signs to approve `message` off-chain.

    The Safe verifies signatures against
    keccak256(0x1901 || domainSeparator(chainId, safe) || hashStruct(SafeMessage(message))).
    """
    return hash_typed_data(build_safe_message_typed_data(message, chain_id, safe_address), hasher)


def format_sign_command(executor: Optional[str], digest: str, sign_path: str) -> str:
    return SIGN_COMMAND_TEMPLATE.format(sign_path=sign_path, executor=executor, digest=digest)
