"""
Partial updates for captions.

A field is either present in the update (and applied, even when its value
is "" or False) or absent (and left untouched). Presence comes from the set
of fields the client actually sent, never from a value being None.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from meme_ideas.models.meme_caption import MemeCaption
from meme_ideas.schemas import CaptionUpdateRequest

UPDATABLE_CAPTION_FIELDS = (
    "variant_label",
    "top_text",
    "bottom_text",
    "extra_text",
    "is_favorite",
    "is_used",
)


@dataclass(frozen=True)
class CaptionPatch:
    changes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: CaptionUpdateRequest) -> "CaptionPatch":
        present = request.model_fields_set
        return cls(
            changes={name: getattr(request, name) for name in UPDATABLE_CAPTION_FIELDS if name in present}
        )

    @property
    def is_empty(self) -> bool:
        return not self.changes

    def apply_to(self, caption: MemeCaption) -> MemeCaption:
        for name, value in self.changes.items():
            setattr(caption, name, value)
        return caption
