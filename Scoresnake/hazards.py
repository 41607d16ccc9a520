# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

from Scoresnake.game import Board, Cell, Direction
from Scoresnake.scoring import ScoreMap
from Scoresnake.utils import Log, debug


def wall_moves(head: Cell, board: Board) -> set[Direction]:
    """
    Richtungen, die direkt aus dem Spielfeld hinausführen.

    :param head: eigener Kopf
    :param board: aktuelles Spielfeld
    :return: Menge der tödlichen Richtungen am Rand
    """
    blocked = set()
    if head.x == 0:
        blocked.add(Direction.LEFT)
    if head.x == board.width - 1:
        blocked.add(Direction.RIGHT)
    if head.y == 0:
        blocked.add(Direction.DOWN)
    if head.y == board.height - 1:
        blocked.add(Direction.UP)
    return blocked


def body_moves(head: Cell, board: Board) -> set[Direction]:
    """
    Richtungen, deren Nachbarfeld von einem Body-Segment belegt ist.

    Geprüft werden alle Schlangen inklusive der eigenen, Schwanzenden
    eingeschlossen.
    """
    blocked = set()
    for segment in board.segments():
        direction = Direction.from_offset(*head.delta(segment))
        if direction is not None:
            blocked.add(direction)
    return blocked


def dead_moves(head: Cell, board: Board) -> set[Direction]:
    """Alle Richtungen, die im nächsten Zug sicher tödlich sind."""
    return wall_moves(head, board) | body_moves(head, board)


def remove_dead_moves(head: Cell, board: Board, scores: ScoreMap, log: Log = debug) -> ScoreMap:
    """
    Streicht tödliche Richtungen aus der ScoreMap, egal wie gut ihr Wert ist.

    :param head: eigener Kopf
    :param board: aktuelles Spielfeld
    :param scores: bereits bewertete ScoreMap
    :param log: Logger für das Ergebnis
    :return: dieselbe ScoreMap, gefiltert
    """
    for direction in dead_moves(head, board):
        scores.remove(direction)
    log(f"removed dead moves: {scores.as_dict()}")
    return scores
