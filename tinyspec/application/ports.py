from typing import List, Protocol

from tinyspec.core import SpecSummary


class SpecSource(Protocol):
    def load_all(self) -> List[SpecSummary]:
        ...

    def compute_signature(self) -> int:
        ...
