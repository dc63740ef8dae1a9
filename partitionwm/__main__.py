"""
partitionwm - Entry point.

Run with:  python -m partitionwm [--config partitionwm.yaml] [--log-level INFO]
"""

import argparse
import logging
import sys
from pathlib import Path

from partitionwm.config.keymaps import build_binding_table
from partitionwm.config.settings import DEFAULT_CONFIG_PATH, load_settings
from partitionwm.core.actions import ActionRunner
from partitionwm.core.bindings import BindingRegistry
from partitionwm.core.errors import ConfigError


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for partitionwm."""
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    handler = SafeStreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="partitionwm",
        description="Keyboard-driven window partitioning for Windows.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="settings file (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="root log level (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    log = logging.getLogger("partitionwm")

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        log.error("%s", exc)
        return 2

    table = build_binding_table(settings)

    # Windows-only modules load user32 on import
    from partitionwm.core import win32
    from partitionwm.core.manager import EventLoop
    from partitionwm.core.windows_host import WindowsHost

    win32.set_dpi_aware()

    host = WindowsHost()
    runner = ActionRunner(host, settings)
    registry = BindingRegistry(table, host, runner)
    loop = EventLoop(host, registry)

    print("\n" + table.dump_state() + "\n")
    print("=" * 60)
    print("  partitionwm event loop running. Press Ctrl+C to stop.")
    print(f"  Keymap: {settings.keymap_variant.value}")
    print(f"  Screens: {len(host.screens())}")
    print(f"  Chords: {len(table)}")
    print("=" * 60 + "\n")

    loop.start()
    return 0


if __name__ == "__main__":
    sys.exit(main())
