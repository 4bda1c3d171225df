"""
============================================================
 File: selector.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Selettore interattivo basato su fzf. Riceve i nomi delle
     voci su stdin e restituisce la voce scelta, oppure None
     se l'utente annulla o fzf non è disponibile.
============================================================
"""

import shlex
import subprocess
from typing import Optional, Sequence

from cmdy.utils.logger import logger


class FzfSelector:
    def __init__(self, command="fzf", header="Select an option:", options="", console=None, install_url=None):
        self.command = command
        self.header = header
        self.options = shlex.split(options) if isinstance(options, str) else list(options)
        self.console = console
        self.install_url = install_url
        self._hint_shown = False

    def build_argv(self):
        return [self.command, f"--header={self.header}", *self.options]

    def select(self, displays: Sequence[str]) -> Optional[str]:
        """Voce scelta (senza spazi ai bordi) o None in caso di annullamento o errore"""
        try:
            result = subprocess.run(
                self.build_argv(),
                input="\n".join(displays),
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            logger.info(f"Selettore non avviabile ({self.command}): {e}")
            self._show_install_hint()
            return None

        if result.returncode != 0:
            logger.debug(f"Selettore terminato con codice {result.returncode}")
            return None

        selected = (result.stdout or "").strip()
        return selected or None

    def _show_install_hint(self):
        if self.console is None or self._hint_shown:
            return
        self._hint_shown = True
        self.console.print(f"Error: {self.command} not found", style="red", markup=False)
        if self.install_url:
            self.console.print(f"Install fzf: {self.install_url}", markup=False)
