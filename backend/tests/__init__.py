# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from meme_ideas.models.meme_caption import MemeCaption  # noqa: F401
from meme_ideas.models.meme_idea import MemeIdea  # noqa: F401
from meme_ideas.models.meme_template import MemeTemplate  # noqa: F401
