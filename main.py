# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006


from Scoresnake.game import Game
from Scoresnake.utils import debug
from Scoresnake.strategy import move
from Scoresnake.server import run_server

import typing


def info() -> typing.Dict:
    """
    Gibt Meta-Daten des Snakes zurück.
    """
    debug("INFO")
    return {
        #----------------customization----------------
        "apiversion": "1",
        "author": "",
        "color": "#228866",
        "head": "trans-rights-scarf",
        "tail": "pixel",
        #----------------customization----------------
    }


def start(game_state: typing.Dict):
    """
    Wird beim Start des Spiels aufgerufen, nur für die Debug-Ausgabe.
    """
    game = Game.from_json(game_state)
    debug(f"{game.game_id} START")


def end(game_state: typing.Dict):
    """
    Wird am Ende des Spiels aufgerufen.
    """
    game = Game.from_json(game_state)
    debug(f"{game.game_id} END")


HANDLERS = {
    "info": info,
    "start": start,
    "move": move,
    "end": end
}


if __name__ == "__main__":
    run_server(HANDLERS)
