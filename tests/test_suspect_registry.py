import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from mysteries.suspect_registry import SuspectRegistry, suspect_hash


def _scenario_registry() -> SuspectRegistry:
    registry = SuspectRegistry()
    registry.associate("Sr. Verde", "Diário faltando páginas.")
    registry.associate("Sr. Verde", "Faca com manchas de sangue.")
    registry.associate("Sra. Rosa", "Telefone quebrado.")
    return registry


def test_hash_is_additive_modulo_table_size():
    assert suspect_hash("ab") == (97 + 98) % 10 == 5
    assert suspect_hash("ab") == suspect_hash("ba")
    assert suspect_hash("", 10) == 0
    assert suspect_hash("ab", 7) == 195 % 7


def test_find_suspect_by_clue_scenario():
    registry = _scenario_registry()
    suspect = registry.find_suspect_by_clue("Faca com manchas de sangue.")
    assert suspect is not None
    assert suspect.name == "Sr. Verde"
    assert registry.find_suspect_by_clue("Telefone quebrado.").name == "Sra. Rosa"
    assert registry.find_suspect_by_clue("Toalha molhada.") is None


def test_most_cited_scenario():
    leader = _scenario_registry().most_cited()
    assert leader.name == "Sr. Verde"
    assert leader.clue_count() == 2


def test_most_cited_empty_registry():
    assert SuspectRegistry().most_cited() is None


def test_most_cited_two_versus_one():
    registry = SuspectRegistry()
    registry.associate("B", "only clue")
    registry.associate("A", "first")
    registry.associate("A", "second")
    assert registry.most_cited().name == "A"


def test_associate_is_idempotent():
    registry = _scenario_registry()
    registry.associate("Sr. Verde", "Faca com manchas de sangue.")
    registry.associate("Sr. Verde", "Faca com manchas de sangue.")
    assert registry.find_suspect_by_name("Sr. Verde").clue_count() == 2
    assert len(registry) == 2


def test_colliding_names_keep_separate_clue_sets():
    registry = SuspectRegistry()
    registry.associate("ab", "Apple")
    registry.associate("ba", "Zebra")
    registry.associate("ab", "Mango")

    bucket = registry.bucket_of("ab")
    assert [s.name for s in registry.chain(bucket)] == ["ba", "ab"]
    assert list(registry.find_suspect_by_name("ab").clues.in_order()) == ["Apple", "Mango"]
    assert list(registry.find_suspect_by_name("ba").clues.in_order()) == ["Zebra"]
    assert registry.find_suspect_by_clue("Zebra").name == "ba"
    assert registry.find_suspect_by_clue("Mango").name == "ab"


def test_new_suspect_becomes_chain_head():
    registry = SuspectRegistry()
    for name in ["abc", "acb", "bca"]:
        registry.associate(name, f"clue of {name}")
    assert registry.buckets[registry.bucket_of("abc")].name == "bca"
    assert [s.name for s in registry.chain(registry.bucket_of("abc"))] == ["bca", "acb", "abc"]


def test_most_cited_tie_keeps_first_in_bucket_order():
    registry = SuspectRegistry()
    registry.associate("b", "clue b")
    registry.associate("a", "clue a")
    # "a" hashes to bucket 7, "b" to bucket 8
    assert registry.most_cited().name == "a"


def test_most_cited_tie_follows_chain_order():
    registry = SuspectRegistry()
    registry.associate("ab", "Apple")
    registry.associate("ba", "Zebra")
    assert registry.most_cited().name == "ba"


def test_find_suspect_by_clue_returns_first_owner():
    registry = SuspectRegistry()
    registry.associate("b", "shared")
    registry.associate("a", "shared")
    assert registry.find_suspect_by_clue("shared").name == "a"


def test_find_suspect_by_name_is_exact():
    registry = _scenario_registry()
    assert registry.find_suspect_by_name("sr. verde") is None
    assert registry.find_suspect_by_name("Sr. Verde").name == "Sr. Verde"


def test_report_lists_suspects_and_most_cited():
    registry = _scenario_registry()
    text = registry.report()
    lines = text.splitlines()
    assert lines[0] == "=== Análise das evidências ==="
    verde = lines.index(f"[{registry.bucket_of('Sr. Verde')}] Sr. Verde (2 pistas)")
    assert lines[verde + 1:verde + 3] == ["  - Diário faltando páginas.", "  - Faca com manchas de sangue."]
    assert f"[{registry.bucket_of('Sra. Rosa')}] Sra. Rosa (1 pista)" in lines
    assert lines[-1] == "Suspeito mais citado: Sr. Verde (2 pistas)"


def test_report_does_not_change_state():
    registry = _scenario_registry()
    before = [s.to_dict() for s in registry]
    registry.report()
    assert [s.to_dict() for s in registry] == before


def test_report_on_empty_registry():
    text = SuspectRegistry().report()
    assert "Nenhum suspeito registrado." in text
    assert text.splitlines()[-1] == "Suspeito mais citado: nenhum"


def test_invalid_table_size():
    with pytest.raises(ValueError):
        SuspectRegistry(0)
