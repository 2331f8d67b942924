import argparse
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from locations.builders.generate_location import Room
from mysteries.case import Case
from mysteries.engines.generate_mystery import build_case
from service.config import get_settings
from service.logging_setup import setup_logging
from service.models import NameText

logger = logging.getLogger(__name__)

RULE = "============================================="
PROMPT = "Para onde deseja ir? (e: esquerda, d: direita, s: sair/voltar, p: ver pistas, a: analisar, x <nome>: acusar): "
INVALID = "Opção inválida. Tente novamente."

_name_adapter = TypeAdapter(NameText)


class Explorer:
    """Walks the mansion with an explicit navigation stack.

    Moving into a wing pushes the room, ``s`` pops back to the previous room and
    popping the entrance hall ends the exploration. Only the first
    non-blank character of a command selects the action, case-sensitively.
    """

    def __init__(self, case: Case):
        self.case = case
        self.stack: List[Room] = []

    @property
    def current(self) -> Optional[Room]:
        return self.stack[-1] if self.stack else None

    @property
    def active(self) -> bool:
        return bool(self.stack)

    def start(self) -> List[str]:
        return self._enter(self.case.mansion)

    def handle(self, command: str) -> List[str]:
        command = command.strip()
        if not self.active:
            return ["A exploração terminou."]
        if not command:
            return [INVALID]

        action, argument = command[0], command[1:]
        room = self.current
        if action == "e":
            if room.left is None:
                return ["Caminho 'e' bloqueado ou inexistente. Tente novamente."]
            return self._enter(room.left)
        if action == "d":
            if room.right is None:
                return ["Caminho 'd' bloqueado ou inexistente. Tente novamente."]
            return self._enter(room.right)
        if action == "p":
            return self._show_clues()
        if action == "a":
            return self.case.registry.report().splitlines()
        if action == "x":
            return self._accuse(argument.strip())
        if action == "s":
            return self._back()
        return [INVALID]

    def menu(self) -> List[str]:
        room = self.current
        lines = [RULE, "Ações e Opções de Caminho:"]
        if room.left is not None:
            lines.append(f"  [e] Ir para: {room.left.name}")
        if room.right is not None:
            lines.append(f"  [d] Ir para: {room.right.name}")
        lines.append("  [p] Ver todas as pistas coletadas (em ordem)")
        lines.append("  [a] Analisar as evidências")
        lines.append("  [x] Acusar um suspeito")
        lines.append("  [s] Voltar ao cômodo anterior / Sair da mansão")
        lines.append(RULE)
        return lines

    def _enter(self, room: Room) -> List[str]:
        self.stack.append(room)
        return self._describe(room)

    def _describe(self, room: Room) -> List[str]:
        lines = ["", RULE, f"Você está no cômodo: {room.name}"]
        if room.has_clue():
            lines.append(f"Pista encontrada nesse cômodo: {room.clue}")
            suspect = self.case.visit(room)
            if suspect is not None:
                lines.append(f"Esta pista aponta para: {suspect.name}")
            else:
                lines.append("Nenhum suspeito ligado a esta pista.")
        else:
            lines.append("Nenhuma pista encontrada aqui.")
        if room.is_dead_end():
            lines.append("Caminho sem saída. Volte para continuar explorando.")
        lines.append(RULE)
        return lines

    def _back(self) -> List[str]:
        left_room = self.stack.pop()
        logger.debug("Leaving %s", left_room.name)
        if not self.stack:
            return ["Saindo da exploração."]
        return [f"Voltando para: {self.current.name}."] + self._describe(self.current)

    def _show_clues(self) -> List[str]:
        clues = self.case.collected_clues()
        if not clues:
            return ["", "Nenhuma pista coletada ainda."]
        return ["", "Pistas coletadas até agora:"] + [f"- {clue}" for clue in clues]

    def _accuse(self, name: str) -> List[str]:
        try:
            name = _name_adapter.validate_python(name)
        except ValidationError:
            return ["Uso: x <nome do suspeito>"]
        result = self.case.accuse(name)
        if not result.known_suspect:
            return [f"{name} não está entre os suspeitos."]
        lines = [f"Acusando {result.suspect}. Pistas coletadas contra o suspeito: {len(result.supporting_clues)}"]
        lines.extend(f"- {clue}" for clue in result.supporting_clues)
        if result.verdict:
            lines.append("As evidências se sustentam. Caso encerrado!")
        else:
            lines.append(f"Evidências insuficientes: são necessárias pelo menos {result.threshold} pistas.")
        return lines


def run(explorer: Explorer) -> None:
    for line in explorer.start():
        print(line)
    while explorer.active:
        for line in explorer.menu():
            print(line)
        try:
            command = input(PROMPT)
        except EOFError:
            break
        for line in explorer.handle(command):
            print(line)


def main():
    parser = argparse.ArgumentParser(description="Explore the mansion and collect clues")
    parser.add_argument("--template", default=None, help="Case template name")
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level)
    case = build_case(args.template, settings)
    print(case.title)
    run(Explorer(case))


if __name__ == "__main__":
    main()
