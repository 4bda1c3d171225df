"""
============================================================
 File: menu_config.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Caricamento delle voci di menu dichiarate nel file
     config.yaml. Valida la struttura del documento e
     restituisce una lista di MenuOption nell'ordine del file.
============================================================
"""

from pathlib import Path
from typing import List

import yaml

from cmdy.errors import ConfigNotFoundError, ConfigParseError
from cmdy.models.menu_option import MenuOption
from cmdy.utils.file_loader import load_file
from cmdy.utils.logger import logger

MENU_KEY = "menu_options"


def load_menu_options(path, repo_url=None) -> List[MenuOption]:
    """
    Legge il file di menu e costruisce le voci dichiarate

    Args:
        path: Percorso del file YAML
        repo_url: URL mostrato nei suggerimenti di errore

    Returns:
        Lista di MenuOption (vuota se il documento non ne dichiara)

    Raises:
        ConfigNotFoundError: file assente o non leggibile
        ConfigParseError: YAML non valido o struttura errata
    """
    path = Path(path)
    try:
        text = load_file(path)
    except OSError as e:
        reinstall = f"Reinstall: {repo_url}" if repo_url else "Reinstall cmdy"
        raise ConfigNotFoundError(
            f"Error: Cannot read {path} ({e})",
            solutions=[
                f"Create {path.name} in current directory",
                "Run from cmdy source directory",
                reinstall,
            ],
        ) from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(
            f"Error: Invalid YAML in {path} ({e})",
            solutions=["Please check the file format and try again"],
        ) from e

    options = parse_menu_options(document, path)
    logger.debug(f"{len(options)} voci dichiarate in {path}")
    return options


def parse_menu_options(document, source="config") -> List[MenuOption]:
    """Converte il documento YAML già decodificato in MenuOption"""
    if document is None:
        return []
    if not isinstance(document, dict):
        raise _shape_error(source, "top level must be a mapping")

    entries = document.get(MENU_KEY)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise _shape_error(source, f"'{MENU_KEY}' must be a list")

    options = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise _shape_error(source, f"entry {index} must be a mapping")

        display = entry.get("display")
        if not isinstance(display, str) or not display.strip():
            raise _shape_error(source, f"entry {index} has no 'display' name")

        commands = entry.get("commands") or {}
        if not isinstance(commands, dict):
            raise _shape_error(source, f"'commands' of {display!r} must be a mapping")

        parsed = {}
        for os_key, command in commands.items():
            if isinstance(command, (dict, list)):
                raise _shape_error(source, f"command {os_key!r} of {display!r} must be a string")
            if command is not None:
                parsed[str(os_key)] = str(command)

        options.append(MenuOption(display, parsed))
    return options


def _shape_error(source, detail):
    return ConfigParseError(
        f"Error: Invalid menu in {source} ({detail})",
        solutions=["Please check the file format and try again"],
    )
