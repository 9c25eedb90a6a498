from typing import Final

__all__: list[str] = ["VERSION"]

VERSION: Final[str] = "0.3.0"
