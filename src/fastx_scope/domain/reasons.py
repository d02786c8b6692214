from __future__ import annotations

from enum import Enum


# Stable reason codes carried by every reader error.
class ReasonCode(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    EMPTY_SOURCE = "EMPTY_SOURCE"
    SOURCE_UNREADABLE = "SOURCE_UNREADABLE"
    MALFORMED_RECORD = "MALFORMED_RECORD"
    UNDECODABLE_RECORD = "UNDECODABLE_RECORD"
    TRUNCATED_RECORD = "TRUNCATED_RECORD"
    USE_AFTER_CLOSE = "USE_AFTER_CLOSE"
    RELEASE_FAILED = "RELEASE_FAILED"
