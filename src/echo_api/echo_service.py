# /src/echo_api/echo_service.py
"""
Echo formatting logic shared by every route.

EchoService holds no state: a single instance is safe to share across
all concurrent requests. Bounds for the repeated echo live here as
constants, but echo_with_details itself does not enforce them; the
router checks them before calling in.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MIN_COUNT = 1
MAX_COUNT = 10

MISSING_MESSAGE = "Echo request missing message"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class EchoRequest(BaseModel):
    message: Optional[str] = Field(None, examples=["hello"])
    uppercase: bool = Field(False, description="Uppercase the message before echoing")

    model_config = ConfigDict(extra="ignore")


def count_in_range(count: Optional[int]) -> bool:
    return count is not None and MIN_COUNT <= count <= MAX_COUNT


class EchoService:
    """Pure string formatting for echo responses."""

    def echo(self, message: str) -> str:
        return f"Echo: {message}"

    def echo_with_method(self, message: str, method: str) -> str:
        return f"Echo [{method}]: {message}"

    def echo_with_details(self, message: str, count: int) -> str:
        """Repeat the echo `count` times, one numbered line each.

        No bounds check: count <= 0 gives an empty string.
        """
        return "\n".join(f"Echo {i}: {message}" for i in range(1, count + 1))

    def process_echo_request(self, request: EchoRequest, method: str) -> str:
        if request.message is None:
            return MISSING_MESSAGE

        message = request.message.upper() if request.uppercase else request.message
        return self.echo_with_method(message, method)

    def get_timestamp(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        return f"The current timestamp is: {now.strftime(TIMESTAMP_FORMAT)}"
