"""
Executor configuration loaded from the environment.

Values come from the process environment, optionally seeded from a .env file
in the working directory. Variables already set in the environment win over
the .env file.
"""

import json
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

from .eip712_config import DEFAULT_VAULT_SIGN_PATH


class ConfigError(ValueError):
    """Raised when a required or malformed environment value is found."""


@dataclass(frozen=True)
class ExecutorConfig:
    timestamp: int
    chain_id: int = 1
    executor: Optional[str] = None
    input_tokens: List[str] = field(default_factory=list)
    hop_addresses: List[str] = field(default_factory=list)
    fee_in_bps: int = 0
    fee_token: Optional[str] = None
    fee_receiver: Optional[str] = None
    limit_per_execution: bool = False
    client_id: Optional[str] = None
    address_tags: Dict[str, Any] = field(default_factory=dict)
    executor_name: Optional[str] = None
    executor_logo: Optional[str] = None
    api_base_url: Optional[str] = None
    vault_sign_path: str = DEFAULT_VAULT_SIGN_PATH


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def _parse_int(env: Mapping[str, str], name: str, default: str) -> int:
    raw = env.get(name) or default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _parse_json(env: Mapping[str, str], name: str, default: str, expected: type):
    raw = env.get(name) or default
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{name} is not valid JSON: {e}")
    if not isinstance(value, expected):
        raise ConfigError(f"{name} must be a JSON {expected.__name__}, got {type(value).__name__}")
    return value


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    timestamp: Optional[int] = None,
    dotenv_path: Optional[str] = None,
) -> ExecutorConfig:
    """
    Build an ExecutorConfig.

    When environ is None the process environment is used, after loading the
    .env file (or dotenv_path). Passing an explicit mapping skips .env loading,
    which keeps tests hermetic. The timestamp defaults to "now" in milliseconds.
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    return ExecutorConfig(
        timestamp=current_timestamp_ms() if timestamp is None else timestamp,
        chain_id=_parse_int(environ, "CHAIN_ID", "1"),
        executor=environ.get("EXECUTOR_ADDRESS"),
        input_tokens=_parse_json(environ, "INPUT_TOKENS", "[]", list),
        hop_addresses=_parse_json(environ, "HOP_ADDRESSES", "[]", list),
        fee_in_bps=_parse_int(environ, "FEE_IN_BPS", "0"),
        fee_token=environ.get("FEE_TOKEN"),
        fee_receiver=environ.get("FEE_RECEIVER"),
        # Only the literal "true" enables the limit
        limit_per_execution=environ.get("LIMIT_PER_EXECUTION") == "true",
        client_id=environ.get("CLIENT_ID"),
        address_tags=_parse_json(environ, "ADDRESS_TAGS", "{}", dict),
        executor_name=environ.get("EXECUTOR_NAME"),
        executor_logo=environ.get("EXECUTOR_LOGO"),
        api_base_url=environ.get("API_BASE_URL"),
        vault_sign_path=environ.get("VAULT_SIGN_PATH") or DEFAULT_VAULT_SIGN_PATH,
    )
