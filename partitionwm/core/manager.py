"""
partitionwm.core.manager - EventLoop: the Win32 message loop.

The EventLoop:

  1. Starts the BindingRegistry (registers every chord as a hotkey).
  2. Blocks in GetMessage and routes WM_HOTKEY to the HotkeyManager,
     which runs the bound action synchronously and to completion
     before the next message is read.
  3. Stops on stop(), SIGINT or SIGTERM and releases every hotkey.

All actions run on this single thread; there is nothing to lock.
"""

from __future__ import annotations

import logging
import signal

from partitionwm.core import win32
from partitionwm.core.bindings import BindingRegistry
from partitionwm.core.windows_host import WindowsHost

log = logging.getLogger(__name__)


class EventLoop:
    """
    Runs the message loop for a WindowsHost.

    Usage:
        loop = EventLoop(host, registry)
        loop.start()   # blocks in the Win32 message loop
    """

    def __init__(self, host: WindowsHost, registry: BindingRegistry) -> None:
        self._host = host
        self._registry = registry

        # Flag to request stop
        self._running: bool = False

        # Thread ID of the message loop (needed for cross-thread stop)
        self._loop_thread_id: int = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """
        Start the loop.

        Blocks until stop() is called or a SIGINT/SIGTERM is received.
        """
        log.info("partitionwm starting...")

        count = self._registry.start()
        if count == 0:
            log.error("No chord could be registered, nothing to do")
            self._cleanup()
            return

        def _signal_handler(sig: int, frame: object) -> None:
            log.info("Signal %d received, stopping...", sig)
            self.stop()

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        self._running = True
        self._loop_thread_id = win32.get_current_thread_id()
        log.info("Entering message loop (%d hotkeys)", count)

        try:
            while self._running:
                got_msg, msg = win32.get_message()
                if not got_msg:
                    break

                if msg.message == win32.WM_HOTKEY:
                    self._host.hotkeys.dispatch(msg.wParam)
                else:
                    win32.translate_and_dispatch(msg)

                self._host.overlay.pump()
        finally:
            self._cleanup()

        log.info("partitionwm stopped.")

    def stop(self) -> None:
        """
        Request the event loop to stop.
        Safe to call from any thread or from within a callback.
        """
        self._running = False
        # PostThreadMessage with WM_QUIT to wake up GetMessage from any thread
        if self._loop_thread_id:
            win32.post_thread_message(
                self._loop_thread_id, win32.WM_QUIT, 0, 0
            )
        else:
            win32.post_quit_message(0)

    def _cleanup(self) -> None:
        """Release hotkeys and the overlay."""
        self._running = False
        self._registry.stop()
        self._host.close()
