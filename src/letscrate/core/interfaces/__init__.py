"""Core interfaces/abstractions.

Why:
- Protocols implemented by the concrete adapters (HTTP transport, console).
- The Core depends on these abstractions, which keeps it testable with stubs.
"""
