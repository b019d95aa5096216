"""Core infrastructure: configuration, logging, responses and module wiring."""
