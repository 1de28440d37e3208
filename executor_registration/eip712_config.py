# EIP712 Typed Data Configuration
# This file contains the schemas used for executor registration signing

# Primary types
REGISTER_EXECUTOR_PRIMARY_TYPE = "RegisterExecutor"
SAFE_MESSAGE_PRIMARY_TYPE = "SafeMessage"

# RegisterExecutor fields, in hash order (must match the registry's typehash)
REGISTER_EXECUTOR_FIELDS = [
    {"name": "timestamp", "type": "uint256"},
    {"name": "executor", "type": "address"},
    {"name": "inputTokens", "type": "address[]"},
    {"name": "hopAddresses", "type": "address[]"},
    {"name": "feeInBPS", "type": "uint256"},
    {"name": "feeToken", "type": "address"},
    {"name": "feeReceiver", "type": "address"},
    {"name": "limitPerExecution", "type": "bool"},
    {"name": "clientId", "type": "string"},
]

# Safe off-chain message wrapper:
# keccak256("SafeMessage(bytes message)") under domain {chainId, verifyingContract}
SAFE_MESSAGE_FIELDS = [
    {"name": "message", "type": "bytes"},
]

# Out-of-band signing through the vault ethereum plugin
DEFAULT_VAULT_SIGN_PATH = "ethereum/key-managers/brahma-builder/sign"
SIGN_COMMAND_TEMPLATE = "vault write {sign_path} address='{executor}' hash='{digest}'"

# Registration API routes
REGISTER_EXECUTOR_ROUTE = "/v1/automations/executor"
EXECUTOR_BY_ADDRESS_ROUTE = "/v1/automations/executor/{address}/{chain_id}"
