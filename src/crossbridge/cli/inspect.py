"""Message inspection CLI command."""

from __future__ import annotations

from pathlib import Path

from ..codec.decoder import decode_envelope
from ..config import Network
from ..exceptions import ValidationError
from ..models.base import BridgeMsg


def inspect_file(file_path: Path, network: Network) -> bool:
    """Decode a message envelope from a JSON file and print a report.

    Args:
        file_path: Path to a ``{"type": ..., "value": ...}`` JSON file
        network: Network used to render native addresses in the sign bytes

    Returns:
        True if the message passes basic validation

    Raises:
        DecodeError: If the file does not hold a valid message envelope
    """
    msg = decode_envelope(file_path.read_bytes())

    print("|" * 7, "crossbridge: Cross-chain bridge messages", "|" * 7)
    return inspect_msg(msg, network)


def inspect_msg(msg: BridgeMsg, network: Network) -> bool:
    """Print a breakdown of a single message.

    Args:
        msg: Message to inspect
        network: Network used to render native addresses
    """
    print(f"{'=' * 19} {msg.msg_type}: {type(msg).__name__} {'=' * 19}")
    print(f"Route:    {msg.route}")
    print(f"Summary:  {msg}")
    print(f"Signers:  {', '.join(a.to_bech32(network.hrp) for a in msg.signers())}")

    valid = True
    try:
        msg.validate_basic()
        print("Validation: OK")
    except ValidationError as e:
        print(f"Validation: FAILED ({e.reason})")
        valid = False

    print(f"Sign bytes ({network.name.lower()}):")
    print(msg.sign_bytes(network).decode("utf-8"))
    print()
    return valid
