"""
============================================================
 File: option_merger.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Unisce le voci dichiarate in config.yaml con quelle
     scoperte dalle cartelle degli script. Le dichiarate
     vengono prima; una voce scoperta viene scartata solo se
     il suo percorso compare già, testualmente, tra i comandi
     dichiarati.
============================================================
"""

from typing import Iterable, List, Sequence, Set

from cmdy.models.menu_option import MenuOption
from cmdy.utils.logger import logger


def declared_script_paths(declared: Iterable[MenuOption], prefixes: Sequence[str]) -> Set[str]:
    """Comandi dichiarati che iniziano con il prefisso di una cartella script nota"""
    prefixes = tuple(prefixes)
    paths = set()
    for option in declared:
        for command in option.commands.values():
            if command.startswith(prefixes):
                paths.add(command)
    return paths


def merge_options(
    declared: Sequence[MenuOption],
    discovered: Sequence[MenuOption],
    prefixes: Sequence[str],
) -> List[MenuOption]:
    """
    Lista finale del menu

    Args:
        declared: Voci di config.yaml, nel loro ordine
        discovered: Voci scoperte, nell'ordine di scansione
        prefixes: Prefissi delle cartelle script (es. "./scripts/user")

    Returns:
        Dichiarate seguite dalle scoperte non duplicate
    """
    config_paths = declared_script_paths(declared, prefixes)

    merged = list(declared)
    deduped = 0
    for option in discovered:
        if _invocation(option) in config_paths:
            deduped += 1
            continue
        merged.append(option)

    logger.debug(f"Merge: {len(declared)} dichiarate, {len(discovered)} scoperte, {deduped} duplicate scartate")
    return merged


def _invocation(option):
    # Le voci scoperte hanno lo stesso percorso per ogni sistema
    if option.script_path is not None:
        return option.script_path
    return next(iter(option.commands.values()), None)
