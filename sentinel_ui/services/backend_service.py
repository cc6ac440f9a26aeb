"""
Backend commands: Claude CLI queries and confirmed remediation actions
"""

import asyncio
import json
import logging
import os
import shutil
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, Mapping, Optional

import psutil

from ..config import Config
from ..errors import BackendError
from ..managers.event_bus import EventBus, EventKind

# Type hints only - these are injected via DI
if TYPE_CHECKING:
    from .logging_service import LoggingService

logger = logging.getLogger(__name__)

CLI_NOT_FOUND = "Claude CLI not found. Install with: npm install -g @anthropic-ai/claude-code"

# Output line carrying a proposed action instead of answer text
ACTION_PREFIX = "ACTION:"

# Never terminated through kill_process
PROTECTED_PROCESSES = ("Terminal", "Ghostty", "Code", "Zed", "Safari", "Arc", "Claude", "Finder")

ACTION_INSTRUCTIONS = """If you recommend killing a process or clearing caches, end your answer with
one line of the form:
ACTION: {"action_type": "kill_process", "description": "...", "risk": "moderate", "pid": 1234}
action_type is "kill_process" or "clear_cache", risk is "moderate" or "high"."""


def build_prompt(prompt: str, metrics_json: Optional[str]) -> str:
    """System prompt wrapping the user's question"""
    if metrics_json is None:
        return f"""You are System Sentinel, an AI advisor for macOS system health.

USER QUESTION: {prompt}

Provide concise, actionable advice.
{ACTION_INSTRUCTIONS}"""

    return f"""You are System Sentinel, an AI advisor for macOS system health.

CURRENT SYSTEM STATE:
{metrics_json}

USER QUESTION: {prompt}

Provide concise, actionable advice. If you recommend killing a process,
mention the risk level (low/moderate/high) and what might be lost.
{ACTION_INSTRUCTIONS}"""


def parse_action_line(line: str) -> Optional[Dict[str, Any]]:
    """Decode an `ACTION: {...}` line; None for ordinary output"""
    stripped = line.strip()
    if not stripped.startswith(ACTION_PREFIX):
        return None
    try:
        data = json.loads(stripped[len(ACTION_PREFIX) :])
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def is_protected(name: str) -> bool:
    """Check a process name against the protected list"""
    return any(name == p or name.startswith(f"{p} ") for p in PROTECTED_PROCESSES)


class ClaudeBackend:
    """Runs the Claude CLI and publishes its output as assistant events"""

    def __init__(self, config: Config, event_bus: EventBus, logging_service: "LoggingService"):
        if logging_service is None:
            raise ValueError("logging_service is required")
        self.config = config
        self.event_bus = event_bus
        self.logging_service = logging_service
        self.process: Optional[asyncio.subprocess.Process] = None
        self._stream_task: Optional[asyncio.Task] = None

        # Last lines of stderr, for diagnosing non-zero exits
        self.stderr_tail: Deque[str] = deque(maxlen=100)

    async def submit_query(self, prompt: str, metrics_json: Optional[str]):
        """Start the CLI; its output arrives later as claude-stream/done/error events"""
        binary = shutil.which(self.config.claude_binary)
        if binary is None:
            raise BackendError(CLI_NOT_FOUND)

        env = os.environ.copy()
        env["NO_COLOR"] = "1"
        self.stderr_tail.clear()

        try:
            self.process = await asyncio.create_subprocess_exec(
                binary,
                "--print",
                build_prompt(prompt, metrics_json),
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=env,
            )
        except OSError as e:
            self.logging_service.error(f"Failed to spawn claude: {e}")
            raise BackendError(f"Failed to start Claude: {e}") from e

        logger.info(f"Started claude with PID: {self.process.pid}")
        self._stream_task = asyncio.create_task(self._stream_output(self.process))

    async def _stream_output(self, process: asyncio.subprocess.Process):
        """Publish stdout line by line, then a single done or error event"""
        stderr_task = asyncio.create_task(self._capture_stderr(process))
        action: Optional[Dict[str, Any]] = None

        try:
            while True:
                raw = await process.stdout.readline()
                if not raw:
                    break
                line = raw.decode("utf-8", errors="replace").rstrip("\r\n")

                parsed = parse_action_line(line)
                if parsed is not None:
                    action = parsed
                    continue

                self.event_bus.publish(EventKind.CLAUDE_STREAM, line)
                self.event_bus.publish(EventKind.CLAUDE_STREAM, "\n")

            returncode = await process.wait()
            await stderr_task
        except (OSError, ValueError) as e:
            # ValueError: stdout line longer than the stream limit
            await self._terminate(process)
            self.event_bus.publish(EventKind.CLAUDE_ERROR, f"Claude process error: {e}")
            return
        finally:
            if not stderr_task.done():
                stderr_task.cancel()

        if returncode != 0:
            detail = " | ".join(self.stderr_tail)
            self.logging_service.warning(
                f"Claude exited with status: {returncode}" + (f": {detail}" if detail else "")
            )

        self.event_bus.publish(EventKind.CLAUDE_DONE, {"action": action} if action else {})

    async def _terminate(self, process: asyncio.subprocess.Process):
        """SIGTERM the CLI if it is still running and reap it"""
        if process.returncode is None:
            try:
                process.terminate()
            except ProcessLookupError:
                pass
        await process.wait()

    async def _capture_stderr(self, process: asyncio.subprocess.Process):
        while True:
            raw = await process.stderr.readline()
            if not raw:
                return
            self.stderr_tail.append(raw.decode("utf-8", errors="replace").rstrip("\r\n"))

    async def execute_action(self, payload: Mapping[str, Any]) -> str:
        """Carry out a confirmed action; raises BackendError on failure"""
        action_type = payload.get("action_type")
        logger.info(f"Executing action: {payload}")

        if action_type == "kill_process":
            pid = payload.get("pid")
            if pid is None:
                raise BackendError("No PID specified")
            return self._kill_process(int(pid))

        if action_type == "clear_cache":
            return await self._clear_cache()

        raise BackendError(f"Unknown action type: {action_type}")

    def _kill_process(self, pid: int) -> str:
        try:
            process = psutil.Process(pid)
            name = process.name()
            if is_protected(name):
                raise BackendError(f"Refusing to terminate protected process {name}")
            process.terminate()
        except psutil.NoSuchProcess:
            raise BackendError(f"Kill failed: no process with PID {pid}")
        except psutil.AccessDenied:
            raise BackendError(f"Kill failed: access denied for PID {pid}")

        self.logging_service.info(f"Sent SIGTERM to {name} (PID: {pid})")
        return "Process terminated"

    async def _clear_cache(self) -> str:
        try:
            process = await asyncio.create_subprocess_exec(
                "sudo",
                "-n",
                "purge",
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise BackendError(f"Cache clear failed: {e}") from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            raise BackendError(f"Cache clear failed: {detail or process.returncode}")
        return "Cache cleared"

    async def shutdown(self):
        """Terminate a running CLI process and wait for its reader"""
        if self.process is not None and self.process.returncode is None:
            logger.info("Stopping claude...")
            await self._terminate(self.process)
        if self._stream_task is not None and not self._stream_task.done():
            self._stream_task.cancel()
            try:
                await self._stream_task
            except asyncio.CancelledError:
                pass
