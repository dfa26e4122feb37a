"""Core dispatch contracts.

Composition:
    - `task_types`: per-task parameter models and the `TaskName` literal.
    - `tasks`: registry mapping task names to parameter models and handlers.
    - `errors`: exception taxonomy shared by handlers and the transport.

Package import itself is side-effect free.
"""
