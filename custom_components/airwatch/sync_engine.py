"""
AirQualitySyncEngine — client-side synchronization and command dispatch.

Responsibilities:
- Keep the device list fresh with a repeating timer (every DEVICES_INTERVAL).
- Bind a reading-history timer to the selected device (every READINGS_INTERVAL),
  tearing it down and cancelling its in-flight fetch when the selection changes.
- Send fan commands, record the requested power as an assumption and trigger
  an out-of-band device refresh to reconcile with the backend.
- Publish every state change as a new SyncState snapshot to listeners.

Single event loop, no threads: every field of the snapshot is written from
the loop only, so no locking is needed.
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from typing import Any, Callable, Coroutine

from .api import AirwatchApi
from .const import (
    DEVICES_INTERVAL,
    MESSAGE_CLEAR_DELAY,
    MESSAGE_COMMAND_FAILED,
    MESSAGE_FAN_OFF,
    MESSAGE_FAN_ON,
    READINGS_INTERVAL,
    READINGS_LIMIT,
)
from .models import Command, CommandMode
from .sync_state import SyncState
from .timers import RepeatingTimer

_LOGGER = logging.getLogger(__name__)

StateListener = Callable[[SyncState], None]


class AirQualitySyncEngine:
    """
    Owns the polling timers, the selection-scoped reading subscription and
    the command dispatcher for one backend.

    Lifecycle: start() / async_shutdown(), or `async with engine:`.
    """

    def __init__(
        self,
        api: AirwatchApi,
        *,
        devices_interval: float = DEVICES_INTERVAL,
        readings_interval: float = READINGS_INTERVAL,
        readings_limit: int = READINGS_LIMIT,
        message_clear_delay: float = MESSAGE_CLEAR_DELAY,
    ) -> None:
        self.api = api
        self.state = SyncState()

        self._readings_interval = readings_interval
        self._readings_limit = readings_limit
        self._message_clear_delay = message_clear_delay

        self._devices_timer = RepeatingTimer("devices", devices_interval, self.async_refresh_devices)
        # Reading timer of the current selection; None while inactive
        self._subscription: RepeatingTimer | None = None

        self._listeners: list[StateListener] = []
        self._background_tasks: set[asyncio.Task] = set()
        self._message_timers: set[asyncio.TimerHandle] = set()

        self._running = False
        # Set by async_shutdown(); nothing new is scheduled afterwards
        self._closed = False

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def async_add_listener(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener and return a callable that removes it."""
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _set_state(self, **changes: Any) -> None:
        self.state = dataclasses.replace(self.state, **changes)
        for listener in list(self._listeners):
            listener(self.state)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start the device timer and, if a selection exists, its subscription."""
        if self._running:
            return
        self._running = True
        self._closed = False
        self._devices_timer.start()
        if self.state.selection is not None:
            self._subscribe(self.state.selection)

    async def async_shutdown(self) -> None:
        """Cancel every timer, background task and pending message clear."""
        self._running = False
        self._closed = True

        stopped = [self._devices_timer.stop()]
        if self._subscription is not None:
            stopped.append(self._subscription.stop())
            self._subscription = None
        if self.state.loading:
            self._set_state(loading=False)

        for handle in self._message_timers:
            handle.cancel()
        self._message_timers.clear()

        for task in list(self._background_tasks):
            task.cancel()
        stopped.extend(self._background_tasks)

        pending = [task for task in stopped if task is not None]
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._background_tasks.clear()

    async def __aenter__(self) -> AirQualitySyncEngine:
        self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.async_shutdown()

    # ------------------------------------------------------------------
    # Device list
    # ------------------------------------------------------------------

    async def async_refresh_devices(self) -> None:
        """
        Fetch the device list and replace it wholesale.

        Failures are swallowed: the previous list stays and the next tick
        retries.  Overlapping refreshes are not serialized; the last one to
        complete wins.
        """
        try:
            devices = await self.api.get_devices()
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Failed to fetch device list: %s", exc)
            return

        self._set_state(devices=devices, assumed_power={})

        # Auto-select only when nothing is selected; a selection is never
        # replaced, even if its device is gone from the list.
        if self.state.selection is None and devices:
            self.select_device(devices[0].device_id)

    # ------------------------------------------------------------------
    # Selection-scoped reading subscription
    # ------------------------------------------------------------------

    def select_device(self, device_id: str | None) -> None:
        """Switch the monitored device.  None or "" deselects."""
        device_id = device_id or None
        if device_id == self.state.selection:
            return

        self._unsubscribe()

        if device_id is None:
            _LOGGER.debug("Selection cleared")
            self._set_state(selection=None, loading=False)
            return

        _LOGGER.debug("Selected device %s", device_id)
        if not self._running:
            self._set_state(selection=device_id)
            return
        self._set_state(selection=device_id, loading=True)
        self._subscribe(device_id)

    def _subscribe(self, device_id: str) -> None:
        if not self.state.loading:
            self._set_state(loading=True)
        self._subscription = RepeatingTimer(
            f"readings:{device_id}",
            self._readings_interval,
            lambda: self._fetch_readings(device_id),
        )
        self._subscription.start()

    def _unsubscribe(self) -> None:
        # Cancels the in-flight fetch of the previous selection too, so its
        # late completion can never overwrite the new selection's readings.
        if self._subscription is not None:
            self._subscription.stop()
            self._subscription = None

    async def _fetch_readings(self, device_id: str) -> None:
        try:
            readings = await self.api.get_latest_readings(device_id, self._readings_limit)
        except asyncio.CancelledError:
            _LOGGER.debug("Reading fetch for %s cancelled", device_id)
            raise
        except Exception as exc:  # noqa: BLE001
            _LOGGER.warning("Failed to fetch readings for %s: %s", device_id, exc)
            self._set_state(loading=False)
            return

        self._set_state(readings=readings, loading=False)

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    async def async_toggle_fan(self) -> bool:
        """
        Ask the backend to flip the fan of the selected device.

        Returns True when the backend accepted (queued) the command.  The new
        power is only assumed until the next device list snapshot confirms it.
        """
        state = self.state
        if state.selection is None or state.sending:
            return False

        command = Command(device_id=state.selection, power=not state.power_on, mode=CommandMode.MANUAL)
        self._set_state(sending=True, message="")

        accepted = False
        try:
            await self.api.send_command(command)
        except Exception as exc:  # noqa: BLE001
            _LOGGER.error("Failed to send command %s: %s", command, exc)
            self._set_state(message=MESSAGE_COMMAND_FAILED)
        else:
            accepted = True
            self._set_state(
                message=MESSAGE_FAN_ON if command.power else MESSAGE_FAN_OFF,
                assumed_power={**self.state.assumed_power, command.device_id: command.power},
            )
            self._create_background_task(self.async_refresh_devices())
        finally:
            self._set_state(sending=False)
            self._schedule_message_clear()

        return accepted

    def _schedule_message_clear(self) -> None:
        """
        Blank the message after MESSAGE_CLEAR_DELAY.

        Earlier timers are deliberately left running, so a timer from a
        previous dispatch can clear a newer message.
        """
        if self._closed:
            return
        loop = asyncio.get_running_loop()
        handle: asyncio.TimerHandle | None = None

        def _expire() -> None:
            self._message_timers.discard(handle)
            self._set_state(message="")

        handle = loop.call_later(self._message_clear_delay, _expire)
        self._message_timers.add(handle)

    def _create_background_task(self, coro: Coroutine) -> None:
        if self._closed:
            coro.close()
            return
        task = asyncio.ensure_future(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)
