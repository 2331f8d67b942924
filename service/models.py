from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints

# Clue and name buffers in the case fixtures hold at most 49 characters
MAX_TEXT_LENGTH = 49

ClueText = Annotated[str, StringConstraints(min_length=1, max_length=MAX_TEXT_LENGTH)]
NameText = Annotated[str, StringConstraints(min_length=1, max_length=MAX_TEXT_LENGTH)]


class RoomTemplate(BaseModel):
    name: NameText
    clue: Optional[ClueText] = None
    left: Optional[RoomTemplate] = None
    right: Optional[RoomTemplate] = None


class SuspectTemplate(BaseModel):
    name: NameText
    clues: List[ClueText] = Field(min_length=1)


class CaseTemplate(BaseModel):
    id: str
    title: str
    mansion: RoomTemplate
    suspects: List[SuspectTemplate]


class SuspectView(BaseModel):
    name: str
    clues: List[str]
    clue_count: int = Field(ge=0)


class SuspectLookup(BaseModel):
    suspect: Optional[SuspectView] = None


class RoomView(BaseModel):
    name: str
    clue: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None


class VisitResponse(BaseModel):
    room: RoomView
    new_clue: bool
    suspect: Optional[str] = None


class CluesResponse(BaseModel):
    clues: List[str]
    count: int = Field(ge=0)


class ReportResponse(BaseModel):
    text: str
    most_cited: Optional[SuspectView] = None


class AccusationRequest(BaseModel):
    suspect: NameText


class AccusationResult(BaseModel):
    suspect: str
    known_suspect: bool
    supporting_clues: List[str]
    threshold: int = Field(ge=1)
    verdict: bool
