"""Copy a socket's traffic to and from a pair of local files until both directions finish."""

from __future__ import annotations

import os
import selectors
import socket
import sys
from typing import BinaryIO

from minnow.byte_stream import ByteStream

BUFFER_SIZE = 1048576


def _debug(message: str) -> None:
    sys.stderr.write(f"DEBUG: {message}\n")
    sys.stderr.flush()


def bidirectional_stream_copy(
    sock: socket.socket,
    peer_name: str,
    source: BinaryIO | None = None,
    sink: BinaryIO | None = None,
) -> None:
    """Copy ``source`` to ``sock`` and ``sock`` to ``sink`` until both are finished.

    ``source`` and ``sink`` default to standard input and standard output.
    """
    source = sys.stdin.buffer if source is None else source
    sink = sys.stdout.buffer if sink is None else sink
    source_fd, sink_fd, sock_fd = source.fileno(), sink.fileno(), sock.fileno()
    outbound = ByteStream(BUFFER_SIZE)
    inbound = ByteStream(BUFFER_SIZE)
    outbound_shutdown = False
    inbound_shutdown = False

    sock.setblocking(False)
    os.set_blocking(source_fd, False)
    os.set_blocking(sink_fd, False)

    def healthy() -> bool:
        return not outbound.has_error() and not inbound.has_error()

    def wants_input(stream: ByteStream) -> bool:
        return healthy() and stream.available_capacity() > 0 and not stream.is_closed()

    def read_source() -> None:
        data = os.read(source_fd, outbound.available_capacity())
        if data:
            outbound.push(data)
        else:
            outbound.close()

    def write_socket() -> None:
        nonlocal outbound_shutdown
        if outbound.bytes_buffered():
            outbound.pop(sock.send(outbound.peek()))
        if outbound.is_finished():
            sock.shutdown(socket.SHUT_WR)
            outbound_shutdown = True
            _debug(f"Outbound stream to {peer_name} finished.")

    def read_socket() -> None:
        data = sock.recv(inbound.available_capacity())
        if data:
            inbound.push(data)
        else:
            inbound.close()

    def write_sink() -> None:
        nonlocal inbound_shutdown
        if inbound.bytes_buffered():
            inbound.pop(os.write(sink_fd, inbound.peek()))
        if inbound.is_finished():
            sink.close()
            inbound_shutdown = True
            ending = " uncleanly." if inbound.has_error() else "."
            _debug(f"Inbound stream from {peer_name} finished{ending}")

    rules = [
        [source_fd, selectors.EVENT_READ, read_source,
         lambda: wants_input(outbound), "Outbound stream had error from source.", True],
        [sock_fd, selectors.EVENT_WRITE, write_socket,
         lambda: bool(outbound.bytes_buffered()) or (outbound.is_finished() and not outbound_shutdown),
         "Outbound stream had error from destination.", True],
        [sock_fd, selectors.EVENT_READ, read_socket,
         lambda: wants_input(inbound), "Inbound stream had error from source.", True],
        [sink_fd, selectors.EVENT_WRITE, write_sink,
         lambda: bool(inbound.bytes_buffered()) or (inbound.is_finished() and not inbound_shutdown),
         "Inbound stream had error from destination.", True],
    ]

    while True:
        wanted = [rule for rule in rules if rule[5] and rule[3]()]
        if not wanted:
            return
        masks: dict[int, int] = {}
        for fd, event, *_ in wanted:
            masks[fd] = masks.get(fd, 0) | event
        # epoll refuses regular files, which stdin may well be.
        selector_type = getattr(selectors, "PollSelector", selectors.SelectSelector)
        with selector_type() as selector:
            for fd, mask in masks.items():
                selector.register(fd, mask)
            ready = {key.fd: events for key, events in selector.select()}
        for rule in wanted:
            fd, event, callback, interest, message, active = rule
            if not (active and ready.get(fd, 0) & event and interest()):
                continue
            try:
                callback()
            except (BlockingIOError, InterruptedError):
                pass
            except OSError:
                rule[5] = False
                _debug(message)
                outbound.set_error()
                inbound.set_error()