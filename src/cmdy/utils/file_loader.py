"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Funzioni di utilità dedicate alla gestione di file:
     lettura di testo, JSON opzionali e controllo del bit
     di esecuzione.
============================================================
"""

import json
import os
import stat
from pathlib import Path

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def load_file(path):
    """Testo del file; solleva OSError se non esiste o non è leggibile"""
    return Path(path).read_text(encoding="utf-8")


def load_json(path):
    """Contenuto JSON del file, None se assente o non valido"""
    try:
        return json.loads(load_file(path))
    except (OSError, ValueError):
        return None


def is_executable(path):
    """True se almeno un bit di esecuzione (owner/group/other) è impostato"""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return False
    return bool(mode & EXECUTE_BITS)
