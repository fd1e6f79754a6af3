"""Connect to, or accept one connection from, a TCP peer and relay it to stdin/stdout."""

from __future__ import annotations

import socket
import sys

from minnow.stream_copy import bidirectional_stream_copy


def usage(program: str) -> str:
    """Return the usage message for ``program``."""
    return (
        f"Usage: {program} [-l] <host> <port>\n\n"
        "  -l specifies listen mode; <host>:<port> is the listening address.\n"
    )


def _resolve(host: str, port: str) -> tuple:
    return socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)[0][4]


def _describe(address: tuple) -> str:
    return f"{address[0]}:{address[1]}"


def open_socket(server_mode: bool, host: str, port: str) -> socket.socket:
    """Connect to ``host``:``port``, or listen there and accept exactly one connection."""
    if server_mode:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listening:
            listening.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listening.bind(_resolve(host, port))
            listening.listen()
            sys.stderr.write("DEBUG: Listening for incoming connection...\n")
            connected, peer = listening.accept()
        sys.stderr.write(f"DEBUG: New connection from {_describe(peer)}.\n")
        return connected

    peer = _resolve(host, port)
    connecting = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sys.stderr.write(f"DEBUG: Connecting to {_describe(peer)}... ")
    try:
        connecting.connect(peer)
    except OSError:
        connecting.close()
        raise
    sys.stderr.write(
        f"DEBUG: Successfully connected to {_describe(connecting.getpeername())}.\n"
    )
    return connecting


def main(argv: list[str] | None = None) -> int:
    program = sys.argv[0] if sys.argv and sys.argv[0] else "tcp_native"
    args = sys.argv[1:] if argv is None else list(argv)

    server_mode = bool(args) and args[0] == "-l"
    if len(args) < 2 or (server_mode and len(args) < 3):
        sys.stderr.write(usage(program))
        return 1

    try:
        host, port = (args[1], args[2]) if server_mode else (args[0], args[1])
        with open_socket(server_mode, host, port) as sock:
            bidirectional_stream_copy(sock, _describe(sock.getpeername()))
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        sys.stderr.write(f"Exception: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())