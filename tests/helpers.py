"""Fakes for the subprocess and HTTP seams."""

import json
import re

from git_commit_message.llm import HttpResponse

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


class FakeRunner:
    """Stands in for SubprocessRunner; returns canned stdout or raises."""

    def __init__(self, output="", error=None):
        self.output = output
        self.error = error
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.output


class FakeTransport:
    """Stands in for UrllibTransport; records every send."""

    def __init__(self, status=200, body=b'{"response": "feat: add login"}', error=None):
        self.status = status
        self.body = body
        self.error = error
        self.calls = []

    def send(self, url, body, headers, timeout):
        self.calls.append({"url": url, "body": body, "headers": dict(headers), "timeout": timeout})
        if self.error is not None:
            raise self.error
        return HttpResponse(status=self.status, body=self.body)

    @property
    def payload(self):
        return json.loads(self.calls[-1]["body"])
