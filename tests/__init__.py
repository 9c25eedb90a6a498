"""Unit tests for the translate plugin.

Tests use pytest with asyncio support; engines and HTTP sessions are replaced via monkeypatch,
so no test touches the network.
"""
