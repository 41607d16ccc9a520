# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import logging
import os
import typing

from flask import Flask, jsonify, request

from Scoresnake.game import InvalidGameState
from Scoresnake.utils import DEBUG, debug


def create_app(handlers: typing.Dict) -> Flask:
    """
    Baut die Flask-App mit den vier Battlesnake-Endpunkten.

    :param handlers: Dictionary mit den Funktionen "info", "start", "move", "end"
    :return: Flask-App (für run_server oder den Test-Client)
    """
    app = Flask(__name__)

    @app.get("/")
    def on_info():
        return handlers["info"]()

    @app.post("/start")
    def on_start():
        game_state = request.get_json(silent=True)
        handlers["start"](game_state)
        return "ok"

    @app.post("/move")
    def on_move():
        game_state = request.get_json(silent=True)
        return handlers["move"](game_state)

    @app.post("/end")
    def on_end():
        game_state = request.get_json(silent=True)
        handlers["end"](game_state)
        return "ok"

    @app.errorhandler(InvalidGameState)
    def on_invalid_game_state(error):
        debug(f"[ERROR] Ungültiger Spielzustand: {error}")
        return jsonify({"error": str(error)}), 400

    @app.after_request
    def identify_server(response):
        response.headers.set(
            "server", "battlesnake/github/starter-snake-python"
        )
        return response

    return app


def run_server(handlers: typing.Dict):
    app = create_app(handlers)

    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))

    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    print(f"\nBattlesnake active at http://{host}:{port}")
    app.run(host=host, port=port, debug=DEBUG)
