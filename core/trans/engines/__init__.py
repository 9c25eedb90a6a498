"""Translation engine implementations.

Importing this package registers every engine with ``TransInterface.registered``.

Modules:
- GoogleTranslation: keyless Google Translate endpoint.
"""

from core.trans.engines.google_gtx import GoogleTranslation

__all__: list[str] = ["GoogleTranslation"]
