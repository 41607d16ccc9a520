# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import typing

from Scoresnake.game import Direction, Game
from Scoresnake.hazards import remove_dead_moves
from Scoresnake.scoring import ScoreMap, build_score_map
from Scoresnake.utils import Log, debug

# Wird gesendet, wenn kein sicherer Zug übrig ist. Die API verlangt einen
# gültigen Zug, verloren ist das Spiel dann ohnehin.
FALLBACK_MOVE = "up"
NO_SAFE_MOVE_SHOUT = "no moves, we will lose!"


def select_move(scores: ScoreMap) -> typing.Optional[typing.Tuple[Direction, int]]:
    """
    Wählt die übrige Richtung mit dem höchsten Wert.

    Bei Gleichstand gewinnt die Richtung, die in ``Direction`` zuerst steht
    (up > right > down > left).

    :param scores: bereits gefilterte ScoreMap
    :return: (Richtung, Punkte) oder None, wenn keine Richtung übrig ist
    """
    candidates = scores.candidates()
    if not candidates:
        return None

    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate[1] > best[1]:
            best = candidate
    return best


def choose_move(game: Game, log: Log = debug) -> typing.Optional[Direction]:
    """
    Hauptentscheidung für einen Zug.
    1. Wände, Schlangen und Futter bewerten
    2. Tödliche Richtungen streichen
    3. Beste übrige Richtung wählen

    :param game: eingelesener Zustand des aktuellen Zugs
    :param log: Logger, Standard ist ``debug``
    :return: gewählte Richtung oder None, wenn die Schlange eingeschlossen ist
    """
    head = game.you.head
    log(f"head position: {head}")

    scores = build_score_map(head, game.board, log)
    remove_dead_moves(head, game.board, scores, log)

    chosen = select_move(scores)
    if chosen is None:
        log(NO_SAFE_MOVE_SHOUT)
        return None

    direction, score = chosen
    log(f"{game.game_id} MOVE {direction.wire_name}, SCORE {score}")
    return direction


def move(game_state: typing.Dict, log: Log = debug) -> typing.Dict:
    """
    Handler für /move: liest den JSON-Zustand ein und liefert die Antwort.

    Liefert ``choose_move`` None (kein sicherer Zug), wird das bewusst als
    gültiger Zug FALLBACK_MOVE gesendet. Die API nimmt nur die vier
    Richtungen an, der eingeschlossene Zustand bleibt über "shout" sichtbar.

    :param game_state: JSON-Daten des aktuellen Zugs
    :param log: Logger
    :return: z. B. {"move": "up"}; ohne sicheren Zug zusätzlich mit "shout"
    :raises InvalidGameState: wenn der Zustand ungültig ist
    """
    game = Game.from_json(game_state)
    direction = choose_move(game, log)
    if direction is None:
        return {"move": FALLBACK_MOVE, "shout": NO_SAFE_MOVE_SHOUT}
    return {"move": direction.wire_name}
