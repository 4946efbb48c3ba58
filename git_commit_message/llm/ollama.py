"""Ollama LLM Client for Local Models"""

from git_commit_message.config import Config
from git_commit_message.llm.base import (
    InferenceError,
    InferenceErrorReason,
    InferenceRequest,
    InferenceResponse,
    Transport,
)
from git_commit_message.llm.transport import UrllibTransport
from git_commit_message.prompts import build_prompt

# Longest a body may be inside an error message
MAX_ERROR_BODY = 500


class OllamaClient:
    """Ollama /api/generate client. One request per call, no retries."""

    GENERATE_PATH = "/api/generate"
    REQUEST_TIMEOUT = 30

    def __init__(self, config: Config, transport: Transport | None = None):
        self.config = config
        self.transport = transport or UrllibTransport()
        self.last_request: InferenceRequest | None = None

    @property
    def name(self) -> str:
        return f"Ollama ({self.config.model})"

    @property
    def url(self) -> str:
        return f"{self.config.ollama_url.rstrip('/')}{self.GENERATE_PATH}"

    def build_request(self, diff: str) -> InferenceRequest:
        return InferenceRequest(
            model=self.config.model,
            prompt=build_prompt(diff),
            temperature=self.config.temperature,
        )

    def infer(self, diff: str) -> str:
        """Send the diff to Ollama and return the raw `response` text."""
        self.last_request = self.build_request(diff)
        return self.send(self.last_request).text

    def send(self, request: InferenceRequest) -> InferenceResponse:
        body = request.to_json()
        response = self.transport.send(
            self.url,
            body,
            {"Content-Type": "application/json"},
            self.REQUEST_TIMEOUT,
        )

        if response.status != 200:
            text = response.body.decode('utf-8', errors='replace')
            shown = text if len(text) <= MAX_ERROR_BODY else text[:MAX_ERROR_BODY] + "..."
            message = f"Ollama API returned non-200 status: {response.status}. Response: {shown}"
            if response.status == 404:
                message += f"\nIs the model pulled? Run: ollama pull {self.config.model}"
            raise InferenceError(
                message,
                InferenceErrorReason.SERVER_ERROR,
                status=response.status,
                body=text,
            )

        return InferenceResponse.from_json(response.body)
