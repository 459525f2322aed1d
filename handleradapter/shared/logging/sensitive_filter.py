# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

SENSITIVE_PATTERNS = [
    # API keys and secrets
    (r"(api[_-]?key\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"(secret[_-]?key\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-]{20,})(['\"]?)", r"\1***REDACTED***\3"),

    # Tokens
    (r"(bearer\s+)([a-zA-Z0-9_\-\.]{20,})", r"\1***REDACTED***", re.IGNORECASE),
    (r"(token\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),

    # Passwords
    (r"(password\s*[:=]\s*['\"]?)([^'\"\s]{6,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),

    # Cookies and sessions
    (r"(session[_-]?id\s*[:=]\s*['\"]?)([a-zA-Z0-9_\-\.]{20,})(['\"]?)", r"\1***REDACTED***\3"),
    (r"(cookie\s*:\s*)([^\r\n]{10,})", r"\1***REDACTED***", re.IGNORECASE),

    # Database URLs with credentials
    (r"(postgres(?:ql)?|mysql|mongodb|redis)://([^:/@\s]+):([^@\s]+)@", r"\1://\2:***REDACTED***@"),

    # Authorization headers
    (r"(authorization\s*:\s*['\"]?)([^'\"\r\n]{10,})(['\"]?)", r"\1***REDACTED***\3", re.IGNORECASE),
]


_COMPILED = [
    (re.compile(entry[0], entry[2] if len(entry) == 3 else 0), entry[1])
    for entry in SENSITIVE_PATTERNS
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in _COMPILED:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: scrubs the message in place and keeps the record."""
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["SENSITIVE_PATTERNS", "sanitize_message", "sanitize_record"]
