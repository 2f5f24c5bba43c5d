"""Shared fixtures: a command runner that records instead of spawning."""

import pytest

from hardware_control.dispatcher import ToolDispatcher
from hardware_control.executor import CommandExecutor


class FakeRunner(CommandExecutor):
    """Records every ExternalCommand; results are scripted per program name.

    A scripted value that is an Exception is raised, anything else is
    returned as the command's output. Unscripted programs succeed with "".
    """

    def __init__(self, results=None):
        super().__init__(timeout=None)
        self.results = dict(results or {})
        self.calls = []

    async def run(self, command):
        self.calls.append(command)
        result = self.results.get(command.program, "")
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def programs(self):
        return [c.program for c in self.calls]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def make_dispatcher():
    """Factory: dispatcher over a controller class backed by a FakeRunner."""

    def _make(controller_cls, results=None):
        fake = FakeRunner(results)
        return ToolDispatcher(controller_cls(fake)), fake

    return _make
