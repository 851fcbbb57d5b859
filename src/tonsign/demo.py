"""
Sign-data demonstration
Signs and verifies a text, a binary and a cell payload with a fresh key

    python -m tonsign.demo
"""
import sys
import os
import json
import base64
from contextlib import contextmanager

from .crypto.keys import KeyPair
from .errors import PayloadError
from .logger import Logger
from .signer import sign_data, verify_sign_data
from .types import TextPayload, BinaryPayload, CellPayload, SignDataParams

DEFAULT_CONFIG = {
    "domain": "app.example.com",
    "address": "UQCyqTmXJpshFu1GW1tyTX6paa3c-37OG9s3uv8ZzX_9GDfx",
    "text": "Hello, TON!",
    "binary_text": "Binary TON Data",
    "schema": "transfer#123 amount:Coins = Transfer",
    "verbose": True,
}


class TeeStream:
    """Duplicate writes to multiple streams (e.g., console + file)."""
    def __init__(self, *streams):
        self.streams = streams

    def write(self, data):
        for stream in self.streams:
            stream.write(data)
            stream.flush()

    def flush(self):
        for stream in self.streams:
            stream.flush()


@contextmanager
def tee_output_to_file(log_path: str):
    """Context manager that mirrors stdout/stderr to a file."""
    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    original_stdout = sys.stdout
    original_stderr = sys.stderr

    with open(log_path, "w", encoding="utf-8") as log_file:
        stdout_tee = TeeStream(original_stdout, log_file)
        stderr_tee = TeeStream(original_stderr, log_file)
        try:
            sys.stdout = stdout_tee
            sys.stderr = stderr_tee
            yield log_file
        finally:
            sys.stdout = original_stdout
            sys.stderr = original_stderr


def load_config(config_path: str) -> dict:
    """Read config/config.json over the defaults"""
    config = dict(DEFAULT_CONFIG)
    try:
        with open(config_path, 'r', encoding='utf-8') as cf:
            config.update(json.load(cf))
    except (OSError, ValueError):
        # If config not present or invalid, fall back to defaults
        pass
    return config


def _build_demo_cell() -> str:
    from pytoniq_core import begin_cell

    cell = (
        begin_cell()
        .store_uint(0x123, 32)  # op-code
        .store_coins(1_000_000_000)  # 1 TON
        .end_cell()
    )
    return base64.b64encode(cell.to_boc()).decode()


def _sign_and_check(label: str, payload, config: dict, keypair: KeyPair, logger: Logger) -> bool:
    print(f"\n{label}:")
    signed = sign_data(
        SignDataParams(
            payload=payload,
            domain=config["domain"],
            private_key=keypair.get_secret_key_bytes(),
            address=config["address"],
        ),
        logger=logger,
    )
    valid = verify_sign_data(signed, keypair.get_public_key_bytes(), logger=logger)
    print(f"  Signature: {signed.signature}")
    print(f"  Timestamp: {signed.timestamp}")
    print(f"  Valid: {valid}")
    return valid


def run_demo(config: dict):
    """
    Run the three payload kinds through sign_data / verify_sign_data

    Returns:
        (logger, all_valid)
    """
    print("=" * 80)
    print("SIGN-DATA DEMONSTRATION")
    print("=" * 80)
    print(f"Domain: {config['domain']}")
    print(f"Address: {config['address']}")
    print("=" * 80)

    logger = Logger("demo", config.get("verbose", True))
    keypair = KeyPair()

    results = [
        _sign_and_check("1. Text message", TextPayload(config["text"]), config, keypair, logger),
        _sign_and_check(
            "2. Binary data",
            BinaryPayload(base64.b64encode(config["binary_text"].encode('utf-8')).decode()),
            config, keypair, logger,
        ),
    ]

    try:
        boc = _build_demo_cell()
    except ImportError:
        print("\n3. Cell: skipped (install tonsign[cell] for pytoniq-core)")
    else:
        try:
            results.append(_sign_and_check("3. Cell", CellPayload(config["schema"], boc),
                                           config, keypair, logger))
        except PayloadError as e:
            print(f"\n3. Cell: failed: {e}")
            results.append(False)

    return logger, all(results)


if __name__ == "__main__":
    config_path = os.path.join(os.getcwd(), 'config', 'config.json')
    config = load_config(config_path)

    log_txt_path = os.path.join("logs", "demo_output.txt")
    with tee_output_to_file(log_txt_path):
        print(f"[demo] Writing console output to {log_txt_path}")
        logger, success = run_demo(config)

        with open('logs/demo_log.json', 'w') as f:
            json.dump(logger.get_logs(), f, indent=2)

        print("\nLogs saved to logs/demo_log.json")
        print(f"Text output saved to {log_txt_path}")

    sys.exit(0 if success else 1)
