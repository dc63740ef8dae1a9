"""
partitionwm.core - Actions, bindings and the host window system.

This package contains:
    - errors        : Exception hierarchy for recoverable failures
    - keycodes      : Win32 modifier flags and virtual key codes
    - combo_parser  : KeyChord and combo string parsing
    - host          : Abstract Host / HostWindow interface
    - actions       : Action values and the ActionRunner
    - bindings      : BindingRegistry (start/stop lifecycle)

Windows-only modules (load user32 on import, never imported here):
    - win32         : Low-level Win32 API bindings via ctypes
    - window        : Live handle to a top-level window
    - keybinds      : Global hotkey registration and dispatch
    - alert         : Tk alert overlay
    - windows_host  : WindowsHost
    - manager       : EventLoop - the Win32 message loop
"""
