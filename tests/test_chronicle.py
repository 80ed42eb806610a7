from dungeon_explorer.game import GameState
from dungeon_explorer.game.chronicle import COLUMNS, Chronicle
from dungeon_explorer.game.generator import starting_room
from dungeon_explorer.models import EncounterEntry, Player, Room


def finished_state(name="Ada"):
    state = GameState(Player.new(name, 30, 1), starting_room())
    state.map.add_room(Room())
    state.turn = 12
    state.record_encounter(EncounterEntry(turn=4, monster="Goblin", outcome="defeated"))
    state.record_encounter(EncounterEntry(turn=7, monster="Orc", outcome="escaped"))
    return state


def test_empty_chronicle(tmp_path):
    chronicle = Chronicle(str(tmp_path / "chronicle.parquet"))
    assert chronicle.run_index == 1
    assert chronicle.last_run is None
    assert list(chronicle.summary().columns) == COLUMNS
    assert chronicle.summary().empty


def test_runs_accumulate_across_sessions(tmp_path):
    path = str(tmp_path / "runs" / "chronicle.parquet")
    row = Chronicle(path).record_run(finished_state(), "died")
    assert row == {
        "run": 1,
        "player": "Ada",
        "level": 1,
        "rooms_explored": 2,
        "monsters_defeated": 1,
        "turns": 12,
        "outcome": "died",
    }

    chronicle = Chronicle(path)
    assert chronicle.run_index == 2
    assert chronicle.last_run["player"] == "Ada"
    assert chronicle.last_run["outcome"] == "died"

    chronicle.record_run(finished_state("Grace"), "victory")
    summary = Chronicle(path).summary()
    assert list(summary["run"]) == [1, 2]
    assert list(summary["outcome"]) == ["died", "victory"]
    assert list(summary["player"]) == ["Ada", "Grace"]
