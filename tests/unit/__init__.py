"""Unit tests.

Purpose
- Verify a single module/function in isolation.

Guidelines
- No real I/O; use small fakes at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
