# Gruppe 3 – Battlesnake Projekt (SS2025)
# Mitglieder:
# Eren Temizkan, 223201982
# Dominik Ide, 220200046
# Dogukan Karakoyun, 223202023
# Alexandra Holsten, 221200813
# Yuxiao Wu, 223200006

import datetime
import os
import typing

DEBUG = os.environ.get("BATTLESNAKE_DEBUG", "1") != "0"  # "0" schaltet Debug ab

Log = typing.Callable[[str], None]


def debug(msg):
    """
    Gibt eine Debug-Nachricht mit Zeitstempel aus, sofern DEBUG aktiviert ist.

    Wird als Standard-Logger in die Zuglogik hineingereicht. Tests können
    stattdessen eine eigene Funktion übergeben, z. B. ``list.append``.

    :param msg: Die auszugebende Debug-Nachricht als Zeichenkette.
    """
    if DEBUG:
        print(f"[{datetime.datetime.now().strftime('%H:%M:%S')}] {msg}", flush=True)
