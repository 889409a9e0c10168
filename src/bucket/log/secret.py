"""Detection and redaction of password-like content in log payloads."""

from __future__ import annotations

from collections.abc import Mapping
import re
from typing import Any

REDACTED = "* log redacted *"

_EXACT_MATCHES = frozenset({"confidential", "encrypted", "hash", "pin"})
_CONTAINS = ("api", "auth", "cert", "cipher", "cred", "key", "pass", "pw", "secret", "sha", "signature", "token")
_WORD_BOUNDARIES = tuple(
    re.compile(rf"(?<![a-zA-Z0-9]){word}(?![a-zA-Z0-9])") for word in ("pin", "sec", "sig")
)
_COMPOUND = tuple(re.compile(p, re.IGNORECASE) for p in (r"api.*key", r"api.*val", r"key.*val"))
_URL_WITH_CREDENTIALS = re.compile(r"(https?://[^\s:/@]*:)([^\s@]*)@")


def likely_secret(text: str) -> bool:
    """Return True if `text` (typically a key name) looks sensitive."""
    lower = str(text).lower()
    if lower in _EXACT_MATCHES:
        return True
    if any(token in lower for token in _CONTAINS):
        return True
    if any(p.search(lower) for p in _WORD_BOUNDARIES):
        return True
    if any(p.search(lower) for p in _COMPOUND):
        return True
    return _URL_WITH_CREDENTIALS.search(lower) is not None


def redact(payload: Any) -> Any:
    """
    Return a copy of `payload` with sensitive values replaced by REDACTED.

    Mapping values under secret-looking keys are replaced, nested mappings and
    sequences are walked, and credentials embedded in URLs are masked.
    """
    if isinstance(payload, Mapping):
        return {
            key: REDACTED if likely_secret(str(key)) else redact(value)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [redact(item) for item in payload]
    if isinstance(payload, tuple):
        return tuple(redact(item) for item in payload)
    if isinstance(payload, str):
        return _URL_WITH_CREDENTIALS.sub(lambda m: f"{m.group(1)}{REDACTED}@", payload)
    return payload
