"""
Process capability for shmenu.

Commands run through the configured shell as a new process group (new
session), with stdio inherited from shmenu. While a child runs, SIGINT
received by shmenu is forwarded to the child's whole process group.
"""

import asyncio
import os
import signal
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Optional


class ProcessHandle(ABC):
    """A spawned command."""

    @property
    @abstractmethod
    def pid(self) -> int:
        ...

    @property
    def pgid(self) -> int:
        """Process group id; a new session leader's group id is its pid."""
        return self.pid

    @abstractmethod
    async def wait(self) -> int:
        """Wait for the process to exit and return its exit status."""
        ...


class ProcessRunner(ABC):
    """Spawns directives in a shell."""

    @abstractmethod
    async def spawn(self, directive: str, working_directory: Optional[str], shell: str) -> ProcessHandle:
        """
        Start `directive` in `shell`.

        Raises:
            OSError: If the process can't be started (e.g. missing shell)
        """
        ...


class AsyncioProcessHandle(ProcessHandle):

    def __init__(self, process: asyncio.subprocess.Process):
        self._process = process

    @property
    def pid(self) -> int:
        return self._process.pid

    async def wait(self) -> int:
        return await self._process.wait()


class SubprocessRunner(ProcessRunner):
    """Runs directives with asyncio subprocesses."""

    async def spawn(self, directive: str, working_directory: Optional[str], shell: str) -> ProcessHandle:
        process = await asyncio.create_subprocess_exec(
            shell, "-c", directive,
            cwd=working_directory or None,
            start_new_session=True,
        )
        return AsyncioProcessHandle(process)


def kill_process_group(pgid: int, sig: int = signal.SIGINT) -> None:
    """Send `sig` to every process in the group."""
    try:
        os.killpg(pgid, sig)
    except ProcessLookupError:
        # Group already exited
        pass


@contextmanager
def forward_sigint(handle: ProcessHandle):
    """Forward SIGINT to the child's process group for the duration of the block."""
    loop = asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, kill_process_group, handle.pgid, signal.SIGINT)
    try:
        yield
    finally:
        loop.remove_signal_handler(signal.SIGINT)
