"""
Conjunctive filters for listing captions.

Predicates are collected in a list, one per active filter, and combined
with AND. The idea filter is always present.
"""

from dataclasses import dataclass
from typing import List

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from meme_ideas.models.meme_caption import MemeCaption


@dataclass
class CaptionFilters:
    meme_idea_id: str
    favorites_only: bool = False
    used_only: bool = False

    def predicates(self) -> List[ColumnElement]:
        predicates: List[ColumnElement] = [MemeCaption.meme_idea_id == self.meme_idea_id]
        if self.favorites_only:
            predicates.append(MemeCaption.is_favorite == True)  # noqa: E712
        if self.used_only:
            predicates.append(MemeCaption.is_used == True)  # noqa: E712
        return predicates

    def clause(self) -> ColumnElement:
        return and_(*self.predicates())
