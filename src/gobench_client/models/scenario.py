"""
Scenario payload codec.

The backend expects the scenario as base64 of its UTF-8 bytes, so any
Unicode text survives the trip.
"""

import base64
import binascii

from gobench_client.exceptions import InvalidScenarioPayloadError


def encode_scenario(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_scenario(payload: str) -> str:
    try:
        return base64.b64decode(payload.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError) as e:
        raise InvalidScenarioPayloadError(str(e)) from e
