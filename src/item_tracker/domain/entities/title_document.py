"""Search index document for an item title."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# The only field of an indexed document.
TEXT_FIELD = "text"


@dataclass(frozen=True)
class TitleDocument:
    """A title projected into the search index.

    Documents carry no item id, so they can only ever be appended; there
    is no way to update or delete one by item.
    """

    text: str

    @classmethod
    def mapping(cls) -> dict[str, Any]:
        """Explicit index mapping for the single text field."""
        return {"properties": {TEXT_FIELD: {"type": "text"}}}

    def to_source(self) -> dict[str, str]:
        """Render the document body sent to the index."""
        return {TEXT_FIELD: self.text}
