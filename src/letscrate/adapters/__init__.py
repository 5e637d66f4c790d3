"""Adapters: concrete implementations of the Core interfaces.

Why a package:
- Groups everything that touches the outside world (HTTP, local files, terminal).
- The Core only sees the Protocols in `letscrate.core.interfaces`.
"""
