import argparse
from typing import Iterator, List, Optional

from service.models import RoomTemplate


class Room:
    """A room of the mansion; each room leads to at most two others"""

    def __init__(self, name: str, clue: Optional[str] = None):
        self.name = name
        self.clue = clue
        self.left: Optional["Room"] = None
        self.right: Optional["Room"] = None

    def has_clue(self) -> bool:
        return bool(self.clue)

    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Room({self.name!r})"


def build_mansion(template: RoomTemplate) -> Room:
    """Build the room tree described by a case template, preserving its layout"""
    root = Room(template.name, template.clue)
    pending = [(root, template)]
    while pending:
        room, layout = pending.pop()
        if layout.left is not None:
            room.left = Room(layout.left.name, layout.left.clue)
            pending.append((room.left, layout.left))
        if layout.right is not None:
            room.right = Room(layout.right.name, layout.right.clue)
            pending.append((room.right, layout.right))
    return root


def iter_rooms(root: Room) -> Iterator[Room]:
    """Pre-order walk: room, left wing, right wing"""
    stack = [root]
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Room, name: str) -> Optional[Room]:
    for room in iter_rooms(root):
        if room.name == name:
            return room
    return None


def render_map(root: Room) -> List[str]:
    lines: List[str] = []
    stack = [(root, 0, "")]
    while stack:
        room, depth, side = stack.pop()
        marker = f"[{side}] " if side else ""
        suffix = " *" if room.has_clue() else ""
        lines.append(f"{'  ' * depth}{marker}{room.name}{suffix}")
        if room.right is not None:
            stack.append((room.right, depth + 1, "d"))
        if room.left is not None:
            stack.append((room.left, depth + 1, "e"))
    return lines


def main():
    from mysteries.engines.generate_mystery import load_template

    parser = argparse.ArgumentParser(description="Print the mansion layout of a case template")
    parser.add_argument("--template", default=None, help="Case template name")
    args = parser.parse_args()

    template = load_template(args.template)
    for line in render_map(build_mansion(template.mansion)):
        print(line)
    print("(* cômodo com pista)")


if __name__ == "__main__":
    main()
