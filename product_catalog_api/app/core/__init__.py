"""Core infrastructure: configuration, logging, errors and the JSON store."""
