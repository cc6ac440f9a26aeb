"""
Unix socket connection to the sentinel daemon
"""

import asyncio
import logging
from typing import Optional

from pydantic import ValidationError

from ..config import Config
from ..models.metrics_models import MetricsSnapshot
from .event_bus import EventBus, EventKind

logger = logging.getLogger(__name__)

# Snapshots with long process lists exceed asyncio's 64 KiB default line limit
READ_LIMIT = 1024 * 1024


class IpcManager:
    """Reads newline-delimited JSON snapshots and publishes metrics-update events"""

    def __init__(self, config: Config, event_bus: EventBus):
        self.config = config
        self.event_bus = event_bus
        self._stop_event = asyncio.Event()
        self._writer: Optional[asyncio.StreamWriter] = None

    async def run(self):
        """Connect, read until the connection drops, wait, reconnect; until stopped"""
        self._stop_event.clear()
        socket_path = self.config.ipc_socket_path

        while not self._stop_event.is_set():
            logger.info(f"Connecting to IPC socket at {socket_path}...")
            try:
                reader, self._writer = await asyncio.open_unix_connection(
                    socket_path, limit=READ_LIMIT
                )
            except OSError as e:
                logger.error(
                    f"Failed to connect to IPC socket: {e}. "
                    f"Retrying in {self.config.reconnect_delay_seconds:g} seconds..."
                )
            else:
                logger.info("Connected to Sentinel daemon.")
                try:
                    await self._read_loop(reader)
                finally:
                    await self._close_writer()
                if not self._stop_event.is_set():
                    logger.error(
                        f"IPC connection lost. Retrying in "
                        f"{self.config.reconnect_delay_seconds:g} seconds..."
                    )

            try:
                await asyncio.wait_for(
                    self._stop_event.wait(), timeout=self.config.reconnect_delay_seconds
                )
            except asyncio.TimeoutError:
                pass

    async def stop(self):
        """Stop the reconnect loop and drop the connection"""
        self._stop_event.set()
        await self._close_writer()

    def is_connected(self) -> bool:
        """Check if the daemon socket is connected"""
        return self._writer is not None and not self._writer.is_closing()

    def handle_line(self, line: str) -> Optional[MetricsSnapshot]:
        """Decode one line and publish it; undecodable lines are skipped"""
        line = line.strip()
        if not line:
            return None
        try:
            snapshot = MetricsSnapshot.model_validate_json(line)
        except ValidationError as e:
            logger.warning(f"Skipping malformed metrics line: {e.error_count()} error(s)")
            return None

        self.event_bus.publish(EventKind.METRICS_UPDATE, snapshot)
        return snapshot

    async def _read_loop(self, reader: asyncio.StreamReader):
        while not self._stop_event.is_set():
            try:
                raw = await reader.readline()
            except (OSError, ValueError) as e:
                # ValueError: line longer than READ_LIMIT
                logger.error(f"IPC read error: {e}")
                return
            if not raw:
                return
            self.handle_line(raw.decode("utf-8", errors="replace"))

    async def _close_writer(self):
        if self._writer is None:
            return
        writer, self._writer = self._writer, None
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass
