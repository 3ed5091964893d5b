"""Pong game internals: entities, physics, scoring and feedback sinks."""
