from meme_ideas.models.meme_caption import MemeCaption
from meme_ideas.models.meme_idea import MemeIdea
from meme_ideas.models.meme_template import DEFAULT_SYSTEM_TEMPLATES, MemeTemplate

__all__ = [
    "MemeTemplate",
    "MemeIdea",
    "MemeCaption",
    "DEFAULT_SYSTEM_TEMPLATES",
]
