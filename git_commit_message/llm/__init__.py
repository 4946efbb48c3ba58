"""LLM Client Package"""

from git_commit_message.llm.base import (
    HttpResponse,
    InferenceError,
    InferenceErrorReason,
    InferenceRequest,
    InferenceResponse,
    Transport,
)
from git_commit_message.llm.ollama import OllamaClient
from git_commit_message.llm.transport import UrllibTransport

__all__ = [
    "HttpResponse",
    "InferenceError",
    "InferenceErrorReason",
    "InferenceRequest",
    "InferenceResponse",
    "OllamaClient",
    "Transport",
    "UrllibTransport",
]
