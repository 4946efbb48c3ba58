"""HTTP transport built on urllib."""

import http.client
import socket
import urllib.error
import urllib.request
from typing import Mapping

from git_commit_message.llm.base import HttpResponse, InferenceError, InferenceErrorReason


class UrllibTransport:
    """Blocking single-shot POST. Non-2xx answers are returned, not raised."""

    def send(self, url: str, body: bytes, headers: Mapping[str, str], timeout: float) -> HttpResponse:
        try:
            req = urllib.request.Request(url, data=body, headers=dict(headers), method="POST")
            with urllib.request.urlopen(req, timeout=timeout) as response:
                return HttpResponse(status=response.status, body=response.read())
        except urllib.error.HTTPError as e:
            try:
                error_body = e.read()
            except (OSError, http.client.HTTPException):
                error_body = b""
            finally:
                e.close()
            return HttpResponse(status=e.code, body=error_body)
        except urllib.error.URLError as e:
            if isinstance(e.reason, socket.timeout):
                raise self._failed(url, f"request timed out after {timeout:g}s") from e
            raise self._failed(url, str(e.reason)) from e
        except socket.timeout as e:
            raise self._failed(url, f"request timed out after {timeout:g}s") from e
        except http.client.HTTPException as e:
            raise self._failed(url, f"incomplete response: {e}") from e
        except ValueError as e:
            # unknown url type, raised before any connection
            raise self._failed(url, str(e)) from e
        except OSError as e:
            raise self._failed(url, f"connection lost: {e}") from e

    @staticmethod
    def _failed(url: str, detail: str) -> InferenceError:
        return InferenceError(
            f"failed to send request to Ollama at {url}: {detail}",
            InferenceErrorReason.TRANSPORT_FAILED,
        )
