"""
============================================================
 File: editor.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Ricerca di un editor di testo per il comando
     "cmdy config": prima $EDITOR, poi una lista di editor
     comuni.
============================================================
"""

import shutil

from cmdy.errors import EditorNotFoundError
from cmdy.utils.logger import logger


def find_editor(candidates, environ, console=None):
    """Primo editor disponibile nel PATH; solleva EditorNotFoundError"""
    editor = environ.get("EDITOR", "")
    if editor:
        if shutil.which(editor):
            return editor
        logger.info(f"EDITOR '{editor}' non trovato")
        if console is not None:
            console.print(f"[yellow]Warning: EDITOR '{editor}' not found, trying fallbacks...[/yellow]")

    for candidate in candidates:
        if shutil.which(candidate):
            return candidate

    raise EditorNotFoundError(
        "Error: no suitable text editor found",
        solutions=[
            "Set EDITOR environment variable: export EDITOR=vim",
            "Install a text editor: apt install nano",
            "Edit manually: nano config.yaml",
        ],
    )
