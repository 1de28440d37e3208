"""Registration payload sent to the automation API."""

import copy
from typing import Any, Dict

from .config import ExecutorConfig


def build_registration_payload(config: ExecutorConfig) -> Dict[str, Any]:
    """Payload with an empty signature and a zero timestamp, to be completed after signing."""
    return {
        "config": {
            "inputTokens": list(config.input_tokens),
            "hopAddresses": list(config.hop_addresses),
            "feeInBPS": config.fee_in_bps,
            "feeToken": config.fee_token,
            "feeReceiver": config.fee_receiver,
            "limitPerExecution": config.limit_per_execution,
        },
        "executor": config.executor,
        "signature": "",
        "chainId": config.chain_id,
        "timestamp": 0,
        "executorMetadata": {
            "id": config.client_id,
            "name": config.executor_name,
            "logo": config.executor_logo,
            "metadata": {
                "addressTags": dict(config.address_tags),
            },
        },
    }


def complete_payload(payload: Dict[str, Any], signature: str, timestamp: int) -> Dict[str, Any]:
    completed = copy.deepcopy(payload)
    completed["signature"] = signature
    completed["timestamp"] = int(timestamp)
    return completed
