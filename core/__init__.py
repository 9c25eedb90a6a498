"""Core of the translate plugin.

This package contains the query pipeline (``core.pipeline``), the shared read-only resources
(``core.shared_data``), the plugin facade (``core.plugin``), and the language and translation
sub-packages. Submodules are imported explicitly so that ``config`` can depend on ``core.lang``.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]
