from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from locations.builders.generate_location import Room
from mysteries.case import Case
from mysteries.engines.generate_mystery import build_case
from mysteries.suspect_registry import Suspect

from .config import get_settings
from .models import (
    AccusationRequest, AccusationResult, CluesResponse, ReportResponse,
    RoomView, SuspectLookup, SuspectView, VisitResponse,
)

app = FastAPI(
    title="Detective Quest",
    description="Mansion exploration with indexed clues and suspects",
)


@lru_cache(maxsize=1)
def get_case() -> Case:
    return build_case(settings=get_settings())


def get_case_dep() -> Case:
    return get_case()


def _room_view(room: Room) -> RoomView:
    return RoomView(
        name=room.name,
        clue=room.clue,
        left=room.left.name if room.left else None,
        right=room.right.name if room.right else None,
    )


def _suspect_view(suspect: Optional[Suspect]) -> Optional[SuspectView]:
    if suspect is None:
        return None
    return SuspectView(**suspect.to_dict())


def _require_room(case: Case, name: str) -> Room:
    room = case.room(name)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/rooms/{name}")
def get_room(name: str, case: Case = Depends(get_case_dep)) -> RoomView:
    return _room_view(_require_room(case, name))


@app.post("/rooms/{name}/visit")
def visit_room(name: str, case: Case = Depends(get_case_dep)) -> VisitResponse:
    room = _require_room(case, name)
    new_clue = room.has_clue() and not case.collected.contains(room.clue)
    suspect = case.visit(room)
    return VisitResponse(
        room=_room_view(room),
        new_clue=new_clue,
        suspect=suspect.name if suspect else None,
    )


@app.get("/clues")
def list_clues(case: Case = Depends(get_case_dep)) -> CluesResponse:
    clues = case.collected_clues()
    return CluesResponse(clues=clues, count=len(clues))


@app.get("/clues/{text:path}/suspect")
def clue_suspect(text: str, case: Case = Depends(get_case_dep)) -> SuspectLookup:
    return SuspectLookup(suspect=_suspect_view(case.registry.find_suspect_by_clue(text)))


@app.get("/suspects")
def list_suspects(case: Case = Depends(get_case_dep)) -> List[SuspectView]:
    return [_suspect_view(suspect) for suspect in case.registry.suspects()]


@app.get("/suspects/most-cited")
def most_cited(case: Case = Depends(get_case_dep)) -> SuspectLookup:
    return SuspectLookup(suspect=_suspect_view(case.registry.most_cited()))


@app.get("/report")
def report(case: Case = Depends(get_case_dep)) -> ReportResponse:
    return ReportResponse(
        text=case.registry.report(),
        most_cited=_suspect_view(case.registry.most_cited()),
    )


@app.get("/report.txt", response_class=PlainTextResponse)
def report_text(case: Case = Depends(get_case_dep)) -> str:
    return case.registry.report()


@app.post("/accusations")
def accuse(request: AccusationRequest, case: Case = Depends(get_case_dep)) -> AccusationResult:
    return case.accuse(request.suspect)
