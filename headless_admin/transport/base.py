"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Transport base class and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass
class TransportResponse:
    """Raw outcome of one HTTP call."""
    body: str
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    success: bool = True
    elapsed_ms: float = 0.0

    def get_header(self, key: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = key.lower()
        for name, value in self.headers.items():
            if name.lower() == wanted:
                return value
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "body": self.body,
            "status_code": self.status_code,
            "headers": dict(self.headers),
            "success": self.success,
            "elapsed_ms": self.elapsed_ms,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TransportResponse":
        return cls(
            body=data.get("body", ""),
            status_code=int(data.get("status_code", 0)),
            headers=dict(data.get("headers") or {}),
            success=bool(data.get("success", False)),
            elapsed_ms=float(data.get("elapsed_ms", 0.0)),
        )


class BaseTransport(ABC):
    """Abstract base for all transports.

    A transport performs exactly one HTTP call per ``execute`` and never
    retries. HTTP error statuses come back as responses with
    ``success=False``; only failures to complete the call raise.
    """

    @abstractmethod
    def execute(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """Send a request and return the raw response."""
        ...

    def close(self) -> None:
        """Release transport resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
