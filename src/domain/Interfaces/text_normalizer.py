from typing import List, Protocol

class ITextNormalizer(Protocol):
    def variants(self, text: str) -> List[str]: ...
