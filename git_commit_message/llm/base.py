"""LLM Base Classes and Shared Code"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Protocol

from git_commit_message import CommitMessageError


class InferenceErrorReason(Enum):
    ENCODING_FAILED = "encoding_failed"
    TRANSPORT_FAILED = "transport_failed"
    SERVER_ERROR = "server_error"
    DECODING_FAILED = "decoding_failed"


class InferenceError(CommitMessageError):
    """Raised when a generate call fails at any step.

    SERVER_ERROR errors also carry the HTTP status and response body.
    """

    def __init__(self, message: str, reason: InferenceErrorReason,
                 status: int | None = None, body: str | None = None):
        super().__init__(message, reason)
        self.status = status
        self.body = body


@dataclass(frozen=True)
class InferenceRequest:
    """One non-streaming generate request."""
    model: str
    prompt: str
    temperature: float = 0.0
    stream: bool = False

    def to_payload(self) -> dict:
        return {
            "model": self.model,
            "prompt": self.prompt,
            "stream": self.stream,
            "options": {"temperature": self.temperature},
        }

    def to_json(self) -> bytes:
        try:
            return json.dumps(self.to_payload(), allow_nan=False).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise InferenceError(
                f"failed to marshal request to JSON: {e}",
                InferenceErrorReason.ENCODING_FAILED,
            ) from e


@dataclass(frozen=True)
class InferenceResponse:
    """The generated text; every other field the server sends is ignored."""
    text: str

    @classmethod
    def from_json(cls, body: bytes) -> 'InferenceResponse':
        try:
            data = json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InferenceError(
                f"failed to unmarshal Ollama response: {e}",
                InferenceErrorReason.DECODING_FAILED,
            ) from e

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise InferenceError(
                "failed to unmarshal Ollama response: missing string field 'response'",
                InferenceErrorReason.DECODING_FAILED,
            )
        return cls(text=data["response"])


@dataclass(frozen=True)
class HttpResponse:
    status: int
    body: bytes


class Transport(Protocol):
    """Sends one POST and returns whatever status the server answered with.

    Raises InferenceError(TRANSPORT_FAILED) when no answer arrives.
    """

    def send(self, url: str, body: bytes, headers: Mapping[str, str], timeout: float) -> HttpResponse:
        ...
