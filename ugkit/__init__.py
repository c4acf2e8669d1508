"""Spin lock, ring buffers, a bounded queue, a thread pool, a counting sorted container and base64 helpers."""

__version__ = "0.1.0"