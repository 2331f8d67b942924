"""
Suspect Registry - Chained hash table mapping suspect names to their clue indexes
"""

import logging
from typing import Iterator, List, Optional

from .clue_index import ClueIndex

logger = logging.getLogger(__name__)

DEFAULT_TABLE_SIZE = 10


def suspect_hash(name: str, table_size: int = DEFAULT_TABLE_SIZE) -> int:
    """Additive hash: sum of character codes modulo the table size.

    Anagrams and many unrelated names share a bucket; the chain scan in the
    registry resolves those collisions by exact name comparison.
    """
    return sum(ord(char) for char in name) % table_size


def _clue_label(count: int) -> str:
    return f"{count} pista" if count == 1 else f"{count} pistas"


class Suspect:
    """A named suspect, the clues tied to them and the next link in their bucket chain"""

    def __init__(self, name: str):
        self.name = name
        self.clues = ClueIndex()
        self.next: Optional["Suspect"] = None

    def clue_count(self) -> int:
        return self.clues.count()

    def to_dict(self) -> dict:
        clues = list(self.clues.in_order())
        return {
            "name": self.name,
            "clues": clues,
            "clue_count": len(clues),
        }

    def __repr__(self) -> str:
        return f"Suspect({self.name!r}, clues={self.clue_count()})"


class SuspectRegistry:
    """Fixed-size hash table of suspects, one singly linked chain per bucket"""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE):
        if table_size < 1:
            raise ValueError(f"Table size must be positive, got {table_size}")
        self.table_size = table_size
        self.buckets: List[Optional[Suspect]] = [None] * table_size

    def bucket_of(self, name: str) -> int:
        return suspect_hash(name, self.table_size)

    def associate(self, name: str, clue: str) -> None:
        """Tie a clue to a suspect, registering the suspect on first sight"""
        index = self.bucket_of(name)
        suspect = self._scan_chain(index, name)
        if suspect is None:
            suspect = Suspect(name)
            suspect.next = self.buckets[index]
            self.buckets[index] = suspect
            logger.debug("Registered suspect %r in bucket %d", name, index)
        suspect.clues.insert(clue)

    def find_suspect_by_name(self, name: str) -> Optional[Suspect]:
        return self._scan_chain(self.bucket_of(name), name)

    def find_suspect_by_clue(self, clue: str) -> Optional[Suspect]:
        """First suspect, in bucket then chain order, whose clues include ``clue``"""
        for suspect in self.suspects():
            if suspect.clues.contains(clue):
                return suspect
        return None

    def most_cited(self) -> Optional[Suspect]:
        """Suspect with the most clues; on a tie the first one encountered is kept"""
        leader: Optional[Suspect] = None
        best = -1
        for suspect in self.suspects():
            count = suspect.clues.count()
            if count > best:
                leader = suspect
                best = count
        return leader

    def chain(self, index: int) -> Iterator[Suspect]:
        node = self.buckets[index]
        while node is not None:
            yield node
            node = node.next

    def suspects(self) -> Iterator[Suspect]:
        """All suspects in bucket index order, then chain order"""
        for index in range(self.table_size):
            yield from self.chain(index)

    def report(self) -> str:
        """Human-readable evidence analysis: every suspect with their clues, then the most cited"""
        lines = ["=== Análise das evidências ==="]
        found_any = False
        for index in range(self.table_size):
            for suspect in self.chain(index):
                found_any = True
                clues = list(suspect.clues.in_order())
                lines.append(f"[{index}] {suspect.name} ({_clue_label(len(clues))})")
                lines.extend(f"  - {clue}" for clue in clues)
        if not found_any:
            lines.append("Nenhum suspeito registrado.")

        leader = self.most_cited()
        if leader is None:
            lines.append("Suspeito mais citado: nenhum")
        else:
            lines.append(f"Suspeito mais citado: {leader.name} ({_clue_label(leader.clue_count())})")
        return "\n".join(lines)

    def _scan_chain(self, index: int, name: str) -> Optional[Suspect]:
        for suspect in self.chain(index):
            if suspect.name == name:
                return suspect
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self.suspects())

    def __iter__(self) -> Iterator[Suspect]:
        return self.suspects()
