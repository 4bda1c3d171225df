"""
============================================================
File: errors.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Gerarchia delle eccezioni di cmdy. I componenti del core
sollevano queste eccezioni invece di terminare il processo;
l'unico punto che decide l'exit code è il gestore in main.py.
============================================================
"""

from typing import Iterable


class CmdyError(Exception):
    """Errore fatale mostrato all'utente con eventuali soluzioni"""

    def __init__(self, message: str, solutions: Iterable[str] = (), exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.solutions = list(solutions)
        self.exit_code = exit_code


class ConfigNotFoundError(CmdyError):
    """Il file di menu (config.yaml) non esiste o non è leggibile"""


class ConfigParseError(CmdyError):
    """Il file di menu non è YAML valido o ha una struttura errata"""


class NoOptionsError(CmdyError):
    """Nessuna voce di menu dopo il merge"""


class EditorNotFoundError(CmdyError):
    """Nessun editor di testo disponibile"""
