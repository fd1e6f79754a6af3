"""A bounded in-memory byte stream, a socket/stdio relay, and TCP and HTTP command-line tools."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "stream_copy", "tcp_native", "webget"]