# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import enum
import typing

from Scoresnake.game import Board, Cell, Direction
from Scoresnake.utils import Log, debug

# Futter zählt doppelt so stark wie eine gleich nahe Gefahr
FOOD_WEIGHT = 2


class Transform(enum.Enum):
    """Wie ein Ziel die Richtung beeinflusst: Futter belohnt, Gefahr bestraft."""
    REWARD = "reward"
    PENALTY = "penalty"


class ScoreMap:
    """
    Punktestand pro Richtung für genau einen Zug.

    Alle vier Richtungen starten bei 0 und sind immer vorhanden. Vom
    Gefahrenfilter gestrichene Richtungen behalten ihren Wert, tauchen aber
    nicht mehr in ``candidates()`` auf.
    """
    __slots__ = ('scores', 'removed')

    def __init__(self):
        self.scores: list[int] = [0] * len(Direction)
        self.removed: set[Direction] = set()

    def __getitem__(self, direction: Direction) -> int:
        return self.scores[direction]

    def __repr__(self):
        return f'ScoreMap({self.as_dict()})'

    def adjust(self, direction: Direction, amount: int) -> None:
        self.scores[direction] += amount

    def remove(self, direction: Direction) -> None:
        self.removed.add(direction)

    def candidates(self) -> list[typing.Tuple[Direction, int]]:
        """Übrige (Richtung, Punkte)-Paare in Prioritätsreihenfolge"""
        return [(direction, self.scores[direction]) for direction in Direction
                if direction not in self.removed]

    def as_dict(self) -> typing.Dict[str, int]:
        """Übrige Richtungen als {"up": 12, ...} für die Debug-Ausgabe"""
        return {direction.wire_name: score for direction, score in self.candidates()}


def apply_transform(scores: ScoreMap, direction: Direction, magnitude: int, transform: Transform) -> None:
    """
    Wendet Belohnung oder Strafe auf eine einzelne Richtung an.

    :param scores: ScoreMap des aktuellen Zugs
    :param direction: betroffene Richtung
    :param magnitude: Nähe des Ziels auf dieser Achse
    :param transform: REWARD oder PENALTY
    """
    if transform is Transform.REWARD:
        scores.adjust(direction, FOOD_WEIGHT * magnitude)
    elif transform is Transform.PENALTY:
        scores.adjust(direction, -magnitude)
    else:
        raise ValueError(f"Unbekannte Transformation: {transform!r}")


def score_direction(source: Cell, target: Cell, board: Board, scores: ScoreMap, transform: Transform) -> None:
    """
    Bewertet die Richtungen, die von ``source`` aus auf ``target`` zeigen.

    Pro Achse wird höchstens eine Richtung verändert (links/rechts bzw.
    unten/oben). Liegt das Ziel auf derselben Achse, passiert auf dieser Achse
    nichts. Die Stärke ist ``Spielfeldgröße - |Abstand|``: je näher das Ziel,
    desto größer der Einfluss.

    :param source: Ausgangszelle, normalerweise der eigene Kopf
    :param target: Wand-Ankerpunkt, Body-Segment oder Futter
    :param board: Spielfeld (liefert Breite und Höhe)
    :param scores: ScoreMap, die verändert wird
    :param transform: REWARD für Futter, PENALTY für Gefahren
    """
    dx, dy = source.delta(target)

    if dx < 0:
        apply_transform(scores, Direction.LEFT, board.width - abs(dx), transform)
    elif dx > 0:
        apply_transform(scores, Direction.RIGHT, board.width - abs(dx), transform)

    if dy < 0:
        apply_transform(scores, Direction.DOWN, board.height - abs(dy), transform)
    elif dy > 0:
        apply_transform(scores, Direction.UP, board.height - abs(dy), transform)


def wall_anchors(head: Cell, board: Board) -> list[Cell]:
    """
    Projektion des Kopfes auf die vier Spielfeldränder.

    Rechts und oben liegt der Anker auf ``width`` bzw. ``height``, also eine
    Zelle außerhalb des Spielfelds.
    """
    return [
        Cell(0, head.y),
        Cell(board.width, head.y),
        Cell(head.x, 0),
        Cell(head.x, board.height),
    ]


def score_walls(head: Cell, board: Board, scores: ScoreMap) -> None:
    for anchor in wall_anchors(head, board):
        score_direction(head, anchor, board, scores, Transform.PENALTY)


def score_snakes(head: Cell, board: Board, scores: ScoreMap) -> None:
    # eigener Kopf hat Abstand (0, 0) und zählt daher nicht
    for segment in board.segments():
        score_direction(head, segment, board, scores, Transform.PENALTY)


def score_food(head: Cell, board: Board, scores: ScoreMap) -> None:
    for food in board.food:
        score_direction(head, food, board, scores, Transform.REWARD)


def build_score_map(head: Cell, board: Board, log: Log = debug) -> ScoreMap:
    """
    Baut die vollständige ScoreMap für einen Zug: erst Wände, dann alle
    Schlangen, dann Futter.

    :param head: eigener Kopf
    :param board: aktuelles Spielfeld
    :param log: Logger für Zwischenstände
    :return: ScoreMap mit allen vier Richtungen, noch ungefiltert
    """
    scores = ScoreMap()

    score_walls(head, board, scores)
    log(f"wall score: {scores.as_dict()}")

    score_snakes(head, board, scores)
    log(f"competition score: {scores.as_dict()}")

    score_food(head, board, scores)
    log(f"food score: {scores.as_dict()}")

    return scores
