"""Shared infrastructure: configuration, logging, storage and deadlines."""
