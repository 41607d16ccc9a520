# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import enum
import typing


class InvalidGameState(ValueError):
    """
    Wird geworfen, wenn der JSON-Spielzustand unvollständig oder ungültig ist.

    Die Zuglogik selbst prüft nichts mehr nach, deshalb passiert die gesamte
    Validierung hier beim Einlesen.
    """


def _read(json: typing.Dict, key: str):
    if not isinstance(json, dict):
        raise InvalidGameState(f"Objekt erwartet für '{key}', bekommen: {json!r}")
    if key not in json:
        raise InvalidGameState(f"Feld '{key}' fehlt")
    return json[key]


def _read_list(json: typing.Dict, key: str, default=None) -> list:
    value = json.get(key, default) if default is not None else _read(json, key)
    if not isinstance(value, list):
        raise InvalidGameState(f"Feld '{key}' muss eine Liste sein: {value!r}")
    return value


def _read_int(json: typing.Dict, key: str) -> int:
    value = _read(json, key)
    # bool ist in Python auch ein int, zählt hier aber nicht
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidGameState(f"Feld '{key}' ist keine Ganzzahl: {value!r}")
    return value


class Direction(enum.IntEnum):
    """
    Die vier möglichen Züge.

    Die Reihenfolge der Werte ist gleichzeitig die Priorität beim Gleichstand:
    up > right > down > left.
    """
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def wire_name(self) -> str:
        """Name, wie ihn die Battlesnake-API erwartet ("up", "down", ...)"""
        return self.name.lower()

    @property
    def offset(self) -> typing.Tuple[int, int]:
        """Schritt (dx, dy) für einen Zug in diese Richtung"""
        return _OFFSETS[self]

    @staticmethod
    def from_offset(dx: int, dy: int) -> typing.Optional['Direction']:
        """
        Liefert die Richtung zu einem Nachbarfeld oder None, wenn (dx, dy)
        kein direkter orthogonaler Schritt ist.
        """
        return _BY_OFFSET.get((dx, dy))


_OFFSETS = {
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
}
_BY_OFFSET = {offset: direction for direction, offset in _OFFSETS.items()}


class Cell:
    """
    Repräsentiert eine Zelle auf dem Battlesnake-Spielfeld.

    Ursprung ist unten links, beide Achsen beginnen bei 0.

    :ivar x: X-Koordinate der Zelle.
    :ivar y: Y-Koordinate der Zelle.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __str__(self):
        """String-Darstellung wie (3, 5)"""
        return f'({self.x}, {self.y})'

    def __repr__(self):
        return f'Cell(x={self.x}, y={self.y})'

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def delta(self, other: typing.Self) -> typing.Tuple[int, int]:
        """
        Abstand pro Achse von dieser Zelle zu einer anderen (Ziel minus Quelle).

        :param other: Zielzelle
        :return: Tupel (dx, dy), vorzeichenbehaftet
        """
        return other.x - self.x, other.y - self.y

    @staticmethod
    def from_json(json: typing.Dict):
        """
        Erstellt eine Cell aus einem JSON-Objekt wie {'x': 3, 'y': 5}

        :param json: Dictionary mit 'x' und 'y'
        :return: Neue Cell-Instanz
        :raises InvalidGameState: wenn 'x' oder 'y' fehlt oder keine Zahl ist
        """
        return Cell(_read_int(json, 'x'), _read_int(json, 'y'))


class Snake:
    """
    Repräsentiert eine Schlange im Spiel.

    Besteht aus einer ID, dem Kopf und dem Body (Liste von Zellen, Kopf zuerst).
    """
    __slots__ = ('snake_id', 'head', 'body')

    def __init__(self, snake_id: str, body: list[Cell]):
        """
        :param snake_id: Eindeutige ID der Schlange
        :param body: Liste der Zellen, beginnend mit dem Kopf (nicht leer)
        """
        self.snake_id = snake_id
        self.head = body[0]
        self.body = body

    def __repr__(self):
        return f'Snake(snake_id={self.snake_id}, body={self.body})'

    def __eq__(self, other):
        if not isinstance(other, Snake):
            return False
        return self.snake_id == other.snake_id and self.body == other.body

    def __hash__(self):
        return hash((self.snake_id, tuple(self.body)))

    @staticmethod
    def from_json(json: typing.Dict):
        """
        Erstellt eine neue Snake aus JSON-Daten.

        Fehlt 'head', wird das erste Body-Segment verwendet. Ist 'head'
        angegeben, muss es mit body[0] übereinstimmen.

        :param json: Dictionary mit 'id', 'body' und optional 'head'
        :return: Snake-Instanz
        :raises InvalidGameState: bei leerem Body oder widersprüchlichem Kopf
        """
        snake_id = str(_read(json, 'id'))
        body: list[Cell] = [Cell.from_json(cell_obj) for cell_obj in _read_list(json, 'body')]
        if not body:
            raise InvalidGameState(f"Schlange {snake_id} hat keinen Body")
        if 'head' in json and Cell.from_json(json['head']) != body[0]:
            raise InvalidGameState(f"Kopf von {snake_id} passt nicht zu body[0]")
        return Snake(snake_id, body)


class Board:
    """
    Das Spielfeld eines Zugs: Größe, Futter und alle lebenden Schlangen.
    """
    __slots__ = ('width', 'height', 'food', 'snakes')

    def __init__(self, width: int, height: int, food: list[Cell], snakes: list[Snake]):
        self.width = width
        self.height = height
        self.food = food
        self.snakes = snakes

    def __repr__(self):
        return f'Board({self.width}x{self.height}, food={self.food}, snakes={self.snakes})'

    def segments(self) -> typing.Iterator[Cell]:
        """Alle Body-Segmente aller Schlangen, eigene eingeschlossen"""
        for snake in self.snakes:
            yield from snake.body

    @staticmethod
    def from_json(json: typing.Dict):
        """
        Erstellt ein Board aus dem 'board'-Teil des Spielzustands.

        :param json: Dictionary mit 'width', 'height', 'food' und 'snakes'
        :return: Board-Instanz
        :raises InvalidGameState: bei fehlenden Feldern oder Größe <= 0
        """
        if not isinstance(json, dict):
            raise InvalidGameState(f"Board erwartet, bekommen: {json!r}")
        width = _read_int(json, 'width')
        height = _read_int(json, 'height')
        if width <= 0 or height <= 0:
            raise InvalidGameState(f"Ungültige Spielfeldgröße {width}x{height}")
        food = [Cell.from_json(food_obj) for food_obj in _read_list(json, 'food', [])]
        snakes = [Snake.from_json(snake_obj) for snake_obj in _read_list(json, 'snakes', [])]
        return Board(width, height, food, snakes)


class Game:
    """
    Hält den Zustand eines einzelnen Zugs (Spiel-ID, Turn, Board, eigene Schlange).

    Wird für jeden Request neu gebaut, zwischen den Zügen bleibt nichts erhalten.
    """
    __slots__ = ('game_id', 'turn', 'board', 'you')

    def __init__(self, game_id: str, turn: int, board: Board, you: Snake):
        self.game_id = game_id
        self.turn = turn
        self.board = board
        self.you = you

    @staticmethod
    def from_json(game_state: typing.Dict):
        """
        Erstellt ein neues Game-Objekt aus dem vollständigen Spielzustand.

        Die eigene Schlange steht unter 'you'; 'self' wird als Alias akzeptiert.
        Fehlt sie in board.snakes, wird sie dort ergänzt.

        :param game_state: Komplette JSON-Daten des aktuellen Zugs
        :return: Game-Instanz
        :raises InvalidGameState: wenn der Zustand unvollständig ist
        """
        if not isinstance(game_state, dict):
            raise InvalidGameState("Spielzustand muss ein JSON-Objekt sein")
        game_id = str(_read(_read(game_state, 'game'), 'id'))
        turn = _read_int(game_state, 'turn')
        board = Board.from_json(_read(game_state, 'board'))
        you_json = game_state.get('you', game_state.get('self'))
        if you_json is None:
            raise InvalidGameState("Feld 'you' fehlt")
        you = Snake.from_json(you_json)

        # eigene Schlange muss auf dem Board stehen, sonst fehlt der eigene Body
        # bei Bewertung und Gefahrenfilter
        if all(snake.snake_id != you.snake_id for snake in board.snakes):
            board.snakes.append(you)
        return Game(game_id, turn, board, you)
