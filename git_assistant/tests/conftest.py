from typing import List

import pytest

from git_assistant.console import Console
from git_assistant.terminal import Key


class RecordingConsole(Console):
    def __init__(self):
        super().__init__()
        self.records: List[tuple] = []
        self.clears = 0

    def write(self, *fragments):
        self.records.append(fragments)

    def clear(self):
        self.clears += 1

    @property
    def lines(self) -> List[str]:
        return ["".join(text for _, text in fragments) for fragments in self.records]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def styled(self, style: str) -> List[str]:
        return [text for fragments in self.records for s, text in fragments if s == f"class:{style}"]


class ScriptedKeys:
    def __init__(self, keys):
        self.remaining = list(keys)

    async def read_key(self) -> Key:
        if not self.remaining:
            raise RuntimeError("no more scripted keys")
        return self.remaining.pop(0)


class ScriptedPrompt:
    def __init__(self, answers, on_ask=None):
        self.remaining = list(answers)
        self.messages: List[str] = []
        self.on_ask = on_ask

    async def ask(self, message: str) -> str:
        self.messages.append(message)
        if self.on_ask:
            self.on_ask()
        answer = self.remaining.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def scripted_keys():
    return ScriptedKeys


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt


@pytest.fixture
def repo_dir(tmp_path):
    (tmp_path / ".git").mkdir()
    return tmp_path
