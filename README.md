# minnow

A bounded, in-memory byte stream, and two small command-line tools: a
netcat-like TCP relay and a plain-HTTP page fetcher.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The byte stream

`minnow.byte_stream.ByteStream` is a fixed-capacity pipe. A writer pushes
bytes into it and a reader peeks at and pops them out. A push never stores
more than the remaining capacity; bytes beyond it are dropped.

```python
from minnow.byte_stream import ByteStream

stream = ByteStream(15)
stream.push(b"hello")
stream.close()

stream.peek()                # b"hello"
stream.pop(4)
stream.read(1)               # b"o"
stream.is_finished()         # True: closed and fully drained
stream.bytes_pushed()        # 5
stream.bytes_popped()        # 5
stream.available_capacity()  # 15
```

Other queries: `is_closed()`, `bytes_buffered()` and `has_error()`.
`set_error()` marks the stream as failed. Pushing an empty string is always
harmless; pushing non-empty data after `close()` stores nothing and marks the
stream as failed. `pop(n)` and `read(n)` take at most what is buffered.

## Copying between a socket and local files

```python
from minnow.stream_copy import bidirectional_stream_copy

bidirectional_stream_copy(sock, "peer-name", source, sink)
```

Copies from `source` into the connected socket and from the socket into
`sink` until both directions are finished. `source` and `sink` default to
standard input and standard output; they must be binary files with real file
descriptors. All three are switched to non-blocking mode. Each direction is
buffered in a 1 MiB `ByteStream`. When the source reaches end of file the
socket's write side is shut down; when the peer finishes sending, the sink is
closed. An error on any side fails both directions. Diagnostic messages go to
standard error.

## Commands

### minnow-tcp-native

```
minnow-tcp-native <host> <port>        # connect to host:port
minnow-tcp-native -l <host> <port>     # listen on host:port, accept one connection
```

Once connected, standard input is sent to the peer and whatever the peer
sends is written to standard output, until both directions are finished.
Only IPv4 addresses are used. Wrong arguments print a usage message and exit
with status 1; any failure prints `Exception: ...` and exits with status 1.

The same pieces are available from Python: `minnow.tcp_native.usage(program)`
returns the usage text, and `minnow.tcp_native.open_socket(server_mode, host,
port)` returns the connected socket.

### minnow-webget

```
minnow-webget HOST PATH
```

For example `minnow-webget example.com /index.html`. Sends an HTTP/1.1
`GET` for PATH to HOST on port 80 with `Connection: close`, and writes the
whole reply, status line and headers included, to standard output. It takes
exactly two arguments; otherwise it prints a usage message and exits with
status 1. From Python, `minnow.webget.get_url(host, path)` returns the reply
as bytes.

## What this package does not do

- It has no TCP implementation of its own: both commands use the operating
  system's sockets, and `ByteStream` is only an in-memory buffer.
- `minnow-webget` speaks plain HTTP only; there is no HTTPS, no redirect
  following, and the reply is not parsed.
- `minnow-tcp-native` in listen mode serves exactly one connection and then
  exits.