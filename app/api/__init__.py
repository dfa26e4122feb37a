"""API adapter package.

Architectural role:
- Defines the HTTP boundary for the task proxy.
- Performs transport-level validation and response shaping.
- Delegates provider work to the task handlers registered in `app.core.tasks`.
"""
