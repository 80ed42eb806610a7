import pytest

from dungeon_explorer import main as entry_point
from dungeon_explorer.game import Game, GameState
from dungeon_explorer.game.chronicle import Chronicle
from dungeon_explorer.game.generator import boss_room
from dungeon_explorer.game.save import SaveManager
from dungeon_explorer.models import Config, CreatureKind, Player, Room, spawn_monster


@pytest.fixture
def make_game(config_file, fake_terminal):
    def make(inputs, seed=1):
        return Game(config_path=config_file, seed=seed, terminal=fake_terminal(inputs))
    return make


def test_new_game_equip_save_and_quit(make_game, config_file):
    game = make_game(["1", "", "W", "M", "W", "1", "Q", "S", "Q", "3"])
    game.start()

    output = game.terminal.output
    assert "You take the Sword (Damage: 10, Speed: Normal)." in output
    assert "You equip the Sword (Damage: 10, Speed: Normal)." in output
    assert "Game saved to" in output
    assert "Farewell" in output
    assert not game.terminal.inputs
    assert game.state is None

    saved = SaveManager(Config(config_file).save_file).load()
    assert saved.player.name == "Ada"
    assert saved.player.equipped_weapon.base_name == "Sword"
    assert saved.player.stats.attack == 11
    assert saved.turn == 1

    chronicle = Chronicle(Config(config_file).chronicle_file)
    assert chronicle.last_run["outcome"] == "quit"
    assert chronicle.last_run["player"] == "Ada"


def test_quitting_returns_to_the_title(make_game, config_file):
    game = make_game(["1", "", "Q", "1", "Lin", "Q", "3"])
    game.start()

    output = game.terminal.output
    assert not game.terminal.inputs
    assert output.count("1) New Game") == 2
    assert "PREVIOUSLY..." in output
    summary = Chronicle(Config(config_file).chronicle_file).summary()
    assert list(summary["player"]) == ["Ada", "Lin"]
    assert list(summary["outcome"]) == ["quit", "quit"]


def test_resume_saved_game(make_game):
    first = make_game(["1", "Grace", "W", "S", "Q", "3"])
    first.start()

    second = make_game(["2", "M", "Q", "Q", "3"])
    second.start()
    output = second.terminal.output
    assert "PREVIOUSLY..." in output
    assert "Game successfully loaded." in output
    assert "Name: Grace" in output
    assert "1) Sword (Damage: 10, Speed: Normal)" in output
    assert "Weapon: There is no weapon in the room." in output
    assert second.chronicle.run_index == 3
    assert second.chronicle.last_run["player"] == "Grace"


def test_corrupt_save_reported_at_title(make_game, config_file):
    save_file = Config(config_file).save_file
    SaveManager(save_file).save(GameState(Player.new("Ada", 30, 1), Room()))
    with open(save_file, "w") as corrupt:
        corrupt.write('{"version": 1, "rooms": [null], "current_room": 0, "player": {}}')

    game = make_game(["2", "3"])
    game.start()
    assert "LOAD FAILED" in game.terminal.output
    assert not game.terminal.inputs
    assert game.chronicle.last_run is None


def test_load_flag_without_save_falls_back_to_options(make_game):
    game = make_game(["3"])
    game.start(load=True)
    assert "No saved game found." in game.terminal.output
    assert game.state is None
    assert game.chronicle.last_run is None


def test_invalid_inputs_prompt_again(make_game):
    game = make_game(["9", "1", "Bob", "Z", "P", "x", "7", "Q", "Q", "3"])
    game.start()
    output = game.terminal.output
    assert output.count("Please enter a valid input.") == 3
    assert "Your input was out of range." in output
    assert game.chronicle.last_run["player"] == "Bob"
    # backing out of the potion choice costs no turn
    assert game.chronicle.last_run["turns"] == 0


def test_drink_potion_from_menu(make_game):
    game = make_game(["1", "", "P", "1", "M", "P", "1", "Q", "Q", "3"])
    game.start()
    output = game.terminal.output
    assert "You drink the Potion (Health Restore: 10)." in output
    assert "Your inventory is empty." in output
    assert "Health: 30/30" in output


def test_menu_lists_recent_encounters(make_game, scripted_dice):
    game = make_game(["A", "M", "Q", "Q"])
    game.begin(GameState(Player.new("Ada", 30, 20), Room(monster=spawn_monster(CreatureKind.GOBLIN))))
    game.combat.dice = scripted_dice([20])
    assert game.play() == "quit"
    output = game.terminal.output
    assert "COMBAT" in output
    assert "You defeat the Goblin!" in output
    assert "Recent encounters:" in output
    assert "Turn 1: Goblin (defeated) dealt 20, took 0" in output


def test_death_ends_the_game(make_game, scripted_dice):
    game = make_game(["A"])
    game.begin(GameState(Player.new("Ada", 5, 1), Room(monster=spawn_monster(CreatureKind.ORC))))
    game.combat.dice = scripted_dice([1, 20])
    assert game.play() == "died"
    assert "GAME OVER" in game.terminal.output
    assert game.chronicle.last_run["outcome"] == "died"


def test_defeating_the_boss_and_leaving(make_game, scripted_dice):
    game = make_game(["A", "E"])
    game.begin(GameState(Player.new("Ada", 30, 200), boss_room()))
    game.combat.dice = scripted_dice([20])
    assert game.play() == "victory"
    assert "ROOM 1 (BOSS)" in game.terminal.output
    assert "VICTORY" in game.terminal.output


def test_main_wires_arguments(monkeypatch, config_file, fake_terminal):
    terminal = fake_terminal(["3"])
    monkeypatch.setattr("dungeon_explorer.game.core.Terminal", lambda: terminal)
    entry_point.main(["--config", config_file, "--seed", "5"])
    assert "Welcome to DUNGEON EXPLORER!" in terminal.output
