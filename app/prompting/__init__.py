"""Prompting package.

Deterministic instruction and response-schema builders used by the task
handlers. It does not perform provider calls or response parsing.
"""
