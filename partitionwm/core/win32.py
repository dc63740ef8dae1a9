"""
partitionwm.core.win32 - Low-level Win32 API bindings via ctypes.

Centralizes all user32 calls used by the Windows host so that
no other module needs to import ctypes directly.
"""

from __future__ import annotations

import ctypes
import ctypes.wintypes

from partitionwm.core.keycodes import (  # noqa: F401 - re-exported
    MOD_ALT,
    MOD_CONTROL,
    MOD_NOREPEAT,
    MOD_SHIFT,
    MOD_WIN,
)

# ============================================================================
# DLL handles
# ============================================================================
user32 = ctypes.windll.user32
kernel32 = ctypes.windll.kernel32

# ============================================================================
# Constants
# ============================================================================

# Window messages
WM_QUIT = 0x0012
WM_HOTKEY = 0x0312

# ShowWindow commands
SW_MAXIMIZE = 3
SW_RESTORE = 9

# SetWindowPos flags
SWP_NOZORDER = 0x0004
SWP_NOACTIVATE = 0x0010
HWND_TOP = 0

# ============================================================================
# Wrapped API functions
# ============================================================================

def set_dpi_aware() -> bool:
    """
    Opt the process into DPI awareness.

    Without it GetWindowRect and the monitor rects are virtualized on
    displays with scaling != 100% and every computed frame is off.
    """
    return bool(user32.SetProcessDPIAware())


def get_class_name(hwnd: int) -> str:
    """Get the window class name."""
    buf = ctypes.create_unicode_buffer(256)
    user32.GetClassNameW(hwnd, buf, 256)
    return buf.value


def get_window_text(hwnd: int) -> str:
    """Get the title bar text of a window."""
    length = user32.GetWindowTextLengthW(hwnd)
    if length == 0:
        return ""
    buf = ctypes.create_unicode_buffer(length + 1)
    user32.GetWindowTextW(hwnd, buf, length + 1)
    return buf.value


def get_window_rect(hwnd: int) -> tuple[int, int, int, int]:
    """Return (left, top, right, bottom) of the window."""
    rect = ctypes.wintypes.RECT()
    user32.GetWindowRect(hwnd, ctypes.byref(rect))
    return (rect.left, rect.top, rect.right, rect.bottom)


def is_window_iconic(hwnd: int) -> bool:
    """True if the window is minimized."""
    return bool(user32.IsIconic(hwnd))


def is_window_zoomed(hwnd: int) -> bool:
    """True if the window is maximized."""
    return bool(user32.IsZoomed(hwnd))


def is_window_valid(hwnd: int) -> bool:
    """True if the window handle is still valid."""
    return bool(user32.IsWindow(hwnd))


def get_foreground_window() -> int:
    """Return the HWND of the current foreground window."""
    return user32.GetForegroundWindow() or 0


def show_window(hwnd: int, cmd: int) -> bool:
    return bool(user32.ShowWindow(hwnd, cmd))


def set_window_pos(
    hwnd: int,
    x: int,
    y: int,
    width: int,
    height: int,
    flags: int = SWP_NOZORDER | SWP_NOACTIVATE,
    insert_after: int = HWND_TOP,
) -> bool:
    """Move and resize a window."""
    return bool(
        user32.SetWindowPos(hwnd, insert_after, x, y, width, height, flags)
    )


def get_shell_window() -> int:
    """Return the HWND of the desktop (shell) window."""
    return user32.GetShellWindow() or 0


def get_desktop_window() -> int:
    """Return the HWND of the desktop window."""
    return user32.GetDesktopWindow() or 0


# ============================================================================
# Message loop helpers
# ============================================================================

def get_message() -> tuple[bool, ctypes.wintypes.MSG]:
    """
    Blocking call that retrieves one message from the thread queue.
    Returns (got_message, msg).  got_message is False on WM_QUIT.
    """
    msg = ctypes.wintypes.MSG()
    result = user32.GetMessageW(ctypes.byref(msg), 0, 0, 0)
    return (result > 0, msg)


def translate_and_dispatch(msg: ctypes.wintypes.MSG) -> None:
    user32.TranslateMessage(ctypes.byref(msg))
    user32.DispatchMessageW(ctypes.byref(msg))


def post_quit_message(exit_code: int = 0) -> None:
    user32.PostQuitMessage(exit_code)


def post_thread_message(thread_id: int, msg: int, wparam: int = 0, lparam: int = 0) -> bool:
    """Post a message to a specific thread's message queue (cross-thread safe)."""
    return bool(user32.PostThreadMessageW(thread_id, msg, wparam, lparam))


def get_current_thread_id() -> int:
    """Get the current OS thread ID."""
    return kernel32.GetCurrentThreadId()


# ============================================================================
# Global hotkey registration
# ============================================================================

def register_hotkey(hotkey_id: int, modifiers: int, vk: int) -> bool:
    """
    Register a system-wide hotkey.

    Args:
        hotkey_id: Unique integer identifier for this hotkey.
        modifiers: Combination of MOD_ALT, MOD_CONTROL, MOD_SHIFT, MOD_WIN.
        vk:        Virtual key code.

    Returns:
        True if registered successfully.
    """
    return bool(user32.RegisterHotKey(None, hotkey_id, modifiers, vk))


def unregister_hotkey(hotkey_id: int) -> bool:
    """
    Unregister a previously registered hotkey.

    Args:
        hotkey_id: The ID used during registration.

    Returns:
        True if unregistered successfully.
    """
    return bool(user32.UnregisterHotKey(None, hotkey_id))
