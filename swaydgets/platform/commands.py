"""Window-manager commands issued from the dock, executed over sway IPC."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import i3ipc

from swaydgets.log import get_logger

log = get_logger(name="commands")


def connect() -> i3ipc.Connection:
    """Open a new IPC connection to the running sway instance."""
    return i3ipc.Connection(auto_reconnect=False)


def disconnect(conn: Any) -> None:
    """Close the command socket of a connection opened by `connect`.

    The sync i3ipc Connection has no public close method.
    """
    sock = getattr(conn, "_cmd_socket", None)
    if sock is not None:
        sock.close()


@dataclass(frozen=True)
class FocusWindow:
    """Give keyboard focus to the container with the given id."""

    window_id: int

    def to_sway_command(self) -> str:
        return f"[con_id={self.window_id}] focus"


class CommandExecutor:
    """Runs dock commands, each over a fresh connection.

    Failures are logged and reported as False; the next command starts
    from scratch.
    """

    def __init__(self, connect: Callable[[], Any] = connect) -> None:
        self._connect = connect

    def execute(self, command: FocusWindow) -> bool:
        text = command.to_sway_command()
        try:
            conn = self._connect()
        except Exception as exc:
            log.warning("Could not run %r: %s", text, exc)
            return False
        try:
            replies = conn.command(text)
        except Exception as exc:
            log.warning("Could not run %r: %s", text, exc)
            return False
        finally:
            disconnect(conn)

        ok = True
        for reply in replies or ():
            if not reply.success:
                log.warning("sway rejected %r: %s", text, reply.error)
                ok = False
        log.debug("Ran %r (success=%s)", text, ok)
        return ok
