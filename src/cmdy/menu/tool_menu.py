"""
============================================================
File: tool_menu.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Modulo responsabile del ciclo principale del menu: presenta
le voci nel selettore, esegue il comando associato alla voce
scelta per il sistema corrente e ripresenta il menu finché
l'utente non annulla.
============================================================
"""

from typing import Dict, Sequence

from cmdy.errors import NoOptionsError
from cmdy.models.menu_option import MenuOption
from cmdy.utils.logger import logger
from cmdy.utils.os_key import current_os_key


def build_option_map(options: Sequence[MenuOption]) -> Dict[str, MenuOption]:
    """Mappa nome -> voce; con nomi duplicati vince l'ultima voce"""
    option_map = {}
    for option in options:
        if option.display in option_map:
            logger.debug(f"Nome duplicato nel menu, vince l'ultima voce: {option.display!r}")
        option_map[option.display] = option
    return option_map


class ToolMenu:
    def __init__(self, options, selector, dispatcher, os_key=None, repo_url=None):
        self.options = list(options)
        self.selector = selector
        self.dispatcher = dispatcher
        self.os_key = os_key or current_os_key()
        self.repo_url = repo_url
        self.option_map = build_option_map(self.options)
        self.displays = [option.display for option in self.options]

    def start(self) -> int:
        """
        Ciclo selezione -> esecuzione fino all'annullamento

        Returns:
            Numero di comandi eseguiti

        Raises:
            NoOptionsError: se il menu è vuoto (il selettore non viene avviato)
        """
        if not self.options:
            raise NoOptionsError(
                "Error: No menu options available",
                solutions=[
                    "Add entries to config.yaml",
                    "Add executable scripts to scripts/ directory",
                    f"Check example config: {self.repo_url}" if self.repo_url else "Check the example config",
                ],
            )

        dispatched = 0
        while True:
            selected = self.selector.select(self.displays)
            if not selected:
                break

            option = self.option_map.get(selected)
            if option is None:
                logger.debug(f"Selezione senza corrispondenza ignorata: {selected!r}")
                continue

            command = option.command_for(self.os_key)
            if command is None:
                logger.info(f"Nessun comando per {self.os_key} in {option.display!r}")
                continue

            self.dispatcher.dispatch(command)
            dispatched += 1

        logger.debug(f"Menu chiuso dopo {dispatched} comandi")
        return dispatched
