"""Repository standards checks.

``python -m tools.guard`` scans the packages for:
- use of typing.Any or cast
- "type: ignore" comments
- bare except, or a handler that does not re-raise
- print; use logging instead
- the forbidden marker word

Each check reports ``path:line message`` strings; any report fails the run.
"""
