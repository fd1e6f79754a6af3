"""Fetch a web page over plain HTTP and print the server's reply."""

from __future__ import annotations

import socket
import sys


def get_url(host: str, path: str) -> bytes:
    """Send an HTTP GET for ``path`` to ``host`` and return the full response."""
    request = (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Connection: close\r\n"
        "\r\n"
    ).encode()
    with socket.create_connection((host, "http")) as conn:
        conn.sendall(request)
        chunks = []
        while chunk := conn.recv(65536):
            chunks.append(chunk)
    return b"".join(chunks)


def main(argv: list[str] | None = None) -> int:
    program = sys.argv[0] if sys.argv and sys.argv[0] else "webget"
    args = sys.argv[1:] if argv is None else list(argv)

    if len(args) != 2:
        sys.stderr.write(f"Usage: {program} HOST PATH\n")
        sys.stderr.write(f"\tExample: {program} stanford.edu /class/cs144\n")
        return 1

    host, path = args
    try:
        response = get_url(host, path)
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.buffer.write(response)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())