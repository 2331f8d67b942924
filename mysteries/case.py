"""
Case - One investigation: the mansion, the clues collected so far and the suspect registry
"""

import logging
from typing import List, Optional

from locations.builders.generate_location import Room, find_room
from service.models import AccusationResult

from .clue_index import ClueIndex
from .suspect_registry import Suspect, SuspectRegistry

logger = logging.getLogger(__name__)


class Case:
    """Session context handed to the exploration driver and the HTTP service"""

    def __init__(self, case_id: str, title: str, mansion: Room, registry: SuspectRegistry,
                 accusation_threshold: int = 2):
        self.case_id = case_id
        self.title = title
        self.mansion = mansion
        self.registry = registry
        self.collected = ClueIndex()
        self.accusation_threshold = accusation_threshold

    def room(self, name: str) -> Optional[Room]:
        return find_room(self.mansion, name)

    def visit(self, room: Room) -> Optional[Suspect]:
        """Collect the room's clue, if any, and return the suspect it points to"""
        if not room.has_clue():
            return None
        if not self.collected.contains(room.clue):
            logger.info("Clue collected in %s: %s", room.name, room.clue)
        self.collected.insert(room.clue)
        return self.registry.find_suspect_by_clue(room.clue)

    def collected_clues(self) -> List[str]:
        return list(self.collected.in_order())

    def accuse(self, name: str) -> AccusationResult:
        """Check whether enough collected clues point to the accused suspect"""
        suspect = self.registry.find_suspect_by_name(name)
        supporting: List[str] = []
        if suspect is not None:
            supporting = [clue for clue in suspect.clues.in_order() if self.collected.contains(clue)]
        verdict = len(supporting) >= self.accusation_threshold
        logger.info(
            "Accusation against %s: %d supporting clue(s), verdict=%s",
            name, len(supporting), verdict,
        )
        return AccusationResult(
            suspect=name,
            known_suspect=suspect is not None,
            supporting_clues=supporting,
            threshold=self.accusation_threshold,
            verdict=verdict,
        )
