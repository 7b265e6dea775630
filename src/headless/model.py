# src/headless/model.py (Navigation Layer)
import logging
from datetime import timedelta
from typing import Dict, Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class HttpOutcome(BaseModel):
    """
    The record of a single HTTP round trip within a navigation.
    """
    model_config = ConfigDict(frozen=True)

    location: str
    method: str
    status_code: int
    reason_phrase: str = ""
    elapsed: timedelta = Field(default_factory=timedelta)

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, v):
        return str(v).upper()

    @field_validator("reason_phrase", mode="before")
    @classmethod
    def _normalize_reason(cls, v):
        return "" if v is None else str(v)

    @classmethod
    def record(
            cls,
            location: str,
            method: str,
            status_code: int,
            reason_phrase: Optional[str],
            elapsed: Union[timedelta, float],
    ) -> "HttpOutcome":
        if not isinstance(elapsed, timedelta):
            elapsed = timedelta(seconds=elapsed)
        return cls(
            location=str(location),
            method=method,
            status_code=int(status_code),
            reason_phrase=reason_phrase,
            elapsed=elapsed,
        )

    def __str__(self) -> str:
        return f"{self.method} {self.location} -> {self.status_code} {self.reason_phrase}".rstrip()


class HttpResult(BaseModel):
    """
    The read-only outcome history of one navigation, in request order.
    """
    model_config = ConfigDict(frozen=True)

    outcomes: Tuple[HttpOutcome, ...] = ()

    @property
    def last(self) -> HttpOutcome:
        """The outcome of the terminal request; authoritative for validation."""
        if not self.outcomes:
            raise IndexError("The result does not contain any outcomes.")
        return self.outcomes[-1]

    @property
    def status_code(self) -> int:
        return self.last.status_code

    @property
    def total_elapsed(self) -> timedelta:
        return sum((outcome.elapsed for outcome in self.outcomes), timedelta())

    @property
    def redirect_count(self) -> int:
        return max(len(self.outcomes) - 1, 0)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[HttpOutcome]:
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> HttpOutcome:
        return self.outcomes[index]


class TransportResponse(BaseModel):
    """
    A raw HTTP response as returned by a transport, before any redirect handling.
    """
    model_config = ConfigDict(frozen=True)

    url: str
    method: str
    status_code: int
    reason: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    content: Optional[bytes] = b""
    encoding: Optional[str] = None

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def location(self) -> Optional[str]:
        """The Location header, or None when the response carries none."""
        return self.get_header("Location") or None

    @property
    def content_type(self) -> str:
        return self.get_header("Content-Type", "") or ""

    @property
    def charset(self) -> Optional[str]:
        """The charset parameter of the Content-Type header, or None when none is declared."""
        for parameter in self.content_type.split(";")[1:]:
            name, _, value = parameter.partition("=")
            if name.strip().lower() == "charset" and value.strip():
                return value.strip().strip("'\"")
        return None

    @property
    def text(self) -> str:
        if not self.content:
            return ""
        return self.content.decode(self.encoding or "utf-8", errors="replace")
