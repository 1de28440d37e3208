#!/usr/bin/env python3
"""
Executor registration CLI

Usage:
    executor-registration generate
    executor-registration submit --signature <hex> --timestamp <ms>
    executor-registration status

generate prints the RegisterExecutor digest and the vault command that signs
its SafeMessage wrapper. submit takes the resulting signature and the
timestamp that was signed and registers the executor with the automation API.
"""

import argparse
import json
import sys

from . import __version__
from .api_client import RegistrationClient
from .config import ConfigError, load_config
from .eip712_config import REGISTER_EXECUTOR_ROUTE
from .eip712_helpers import (
    build_executor_typed_data,
    format_sign_command,
    get_safe_message_digest,
    hash_typed_data,
)
from .payload import build_registration_payload, complete_payload
from .signature import adjust_signature_v


def dump(value) -> str:
    return json.dumps(value, indent=2, default=str)


def generate(config, hasher=None) -> int:
    typed_data = build_executor_typed_data(config)
    print(dump(typed_data))

    try:
        data_hash = hash_typed_data(typed_data, hasher)
        safe_digest = get_safe_message_digest(data_hash, config.chain_id, config.executor, hasher)
    except Exception as e:
        print(f"❌ Could not hash executor typed data: {e}", file=sys.stderr)
        return 1

    print("actual", data_hash)
    print(data_hash, config.chain_id, config.executor)
    print(dump({
        "timestamp": config.timestamp,
        "dataHash": data_hash,
        "cmd": format_sign_command(config.executor, safe_digest, config.vault_sign_path),
    }))
    return 0


def submit(config, signature: str, timestamp: int, http=None) -> int:
    try:
        signature = adjust_signature_v(signature)
    except ValueError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    payload = complete_payload(build_registration_payload(config), signature, timestamp)
    print(dump(payload))

    try:
        client = RegistrationClient(config.api_base_url, http)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(f"📤 Submitting executor {config.executor} to {client.url(REGISTER_EXECUTOR_ROUTE)}")
    result = client.register_executor(payload)
    if result.ok:
        print("registered executor:", dump(result.detail))
    else:
        # upstream failures are reported but do not change the exit code
        print("error registering executor:", dump(result.detail), file=sys.stderr)
    return 0


def status(config, http=None) -> int:
    if not config.executor:
        print("❌ EXECUTOR_ADDRESS is not set in the environment variables", file=sys.stderr)
        return 1

    try:
        client = RegistrationClient(config.api_base_url, http)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    try:
        result = client.get_executor(config.executor, config.chain_id)
    except ValueError as e:
        print(f"❌ Invalid EXECUTOR_ADDRESS: {e}", file=sys.stderr)
        return 1

    if result.ok:
        print(f"✅ Executor {config.executor} is registered on chain {config.chain_id}")
        print(dump(result.detail))
    else:
        print(f"⚠️  {result.detail}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="executor-registration",
        description="Generate and submit executor registrations for the automation API",
    )
    parser.add_argument("--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("generate", help="Generate executor digest to sign")

    submit_parser = subparsers.add_parser("submit", help="Submit signed payload to API")
    submit_parser.add_argument("-s", "--signature", required=True, help="Signature string")
    submit_parser.add_argument("-t", "--timestamp", required=True, type=int, help="Timestamp")

    subparsers.add_parser("status", help="Look up the executor registration on the API")
    return parser


def main(argv=None, environ=None, http=None, hasher=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(environ)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.command == "generate":
        return generate(config, hasher)
    if args.command == "submit":
        return submit(config, args.signature, args.timestamp, http)
    return status(config, http)


if __name__ == "__main__":
    sys.exit(main())
