"""
Windows-specific helpers for querying the foreground window bounds.

Separated from the rest of io to keep platform concerns isolated. On other
platforms every helper returns an empty result.
"""
from __future__ import annotations

import os
import ctypes
from typing import Optional, Dict

if os.name == "nt":
    from ctypes import wintypes
    user32 = ctypes.windll.user32
    kernel32 = ctypes.windll.kernel32

    class RECT(ctypes.Structure):
        _fields_ = [
            ("left", ctypes.c_long),
            ("top", ctypes.c_long),
            ("right", ctypes.c_long),
            ("bottom", ctypes.c_long),
        ]

    def get_foreground_executable_name_lower() -> str:
        try:
            hwnd = user32.GetForegroundWindow()
            if not hwnd:
                return ""
            pid = wintypes.DWORD()
            user32.GetWindowThreadProcessId(hwnd, ctypes.byref(pid))
            PROCESS_QUERY_LIMITED_INFORMATION = 0x1000
            hproc = kernel32.OpenProcess(PROCESS_QUERY_LIMITED_INFORMATION, False, pid.value)
            if not hproc:
                return ""
            try:
                buf = ctypes.create_unicode_buffer(1024)
                size = wintypes.DWORD(len(buf))
                if kernel32.QueryFullProcessImageNameW(hproc, 0, buf, ctypes.byref(size)):
                    return os.path.basename(buf.value or "").lower()
                return ""
            finally:
                kernel32.CloseHandle(hproc)
        except OSError:
            return ""

    def get_foreground_window_region() -> Optional[Dict[str, int]]:
        hwnd = user32.GetForegroundWindow()
        if not hwnd:
            return None
        rc = RECT()
        if not user32.GetWindowRect(hwnd, ctypes.byref(rc)):
            return None
        width, height = int(rc.right - rc.left), int(rc.bottom - rc.top)
        if width <= 0 or height <= 0:
            return None
        return {"left": int(rc.left), "top": int(rc.top), "width": width, "height": height}

    def get_window_region(executable: str) -> Optional[Dict[str, int]]:
        """Foreground window bounds when it belongs to `executable`."""
        if not executable or get_foreground_executable_name_lower() != executable.lower():
            return None
        return get_foreground_window_region()
else:
    def get_foreground_executable_name_lower() -> str:
        return ""

    def get_foreground_window_region():
        return None

    def get_window_region(executable: str):
        return None

__all__ = [
    "get_foreground_executable_name_lower",
    "get_foreground_window_region",
    "get_window_region",
]
