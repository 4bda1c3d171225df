"""
============================================================
 File: script_repository.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Questo modulo scopre gli script eseguibili presenti nelle
     cartelle scripts/examples, scripts/user e scripts e li
     trasforma in voci di menu. Le cartelle mancanti vengono
     ignorate senza errori.
============================================================
"""

import os
from typing import Iterable, List, Mapping, Sequence

from cmdy.config.settings import OS_KEYS, RESERVED_NAMES
from cmdy.models.menu_option import MenuOption
from cmdy.utils.file_loader import is_executable
from cmdy.utils.logger import logger

NO_SCRIPTS_MESSAGE = "No executable scripts found in scripts/ directories"
ADD_SCRIPTS_HINT = "Add scripts to scripts/user/ or scripts/examples/"


class ScriptRepository:
    def __init__(
        self,
        directories: Sequence[str],
        tier_prefixes: Mapping[str, str] = None,
        reserved_names: Iterable[str] = RESERVED_NAMES,
        os_keys: Iterable[str] = OS_KEYS,
        console=None,
        base_dir=None,
    ):
        self.directories = list(directories)
        self.tier_prefixes = dict(tier_prefixes or {})
        self.reserved_names = set(reserved_names)
        self.os_keys = tuple(os_keys)
        self.console = console
        self.base_dir = base_dir

    @classmethod
    def from_settings(cls, settings, console=None):
        return cls(
            settings.script_dirs,
            tier_prefixes=settings.tier_prefixes,
            reserved_names=settings.reserved_names,
            console=console,
            base_dir=settings.work_dir,
        )

    def discover(self) -> List[MenuOption]:
        """Scansiona le cartelle nell'ordine dato; nessuna deduplica tra cartelle"""
        discovered = []
        for scripts_dir in self.directories:
            discovered.extend(self.scan_directory(scripts_dir))
        logger.debug(f"{len(discovered)} script scoperti in {self.directories}")
        if not discovered and self.console is not None:
            self.console.print(NO_SCRIPTS_MESSAGE, style="yellow")
            self.console.print(ADD_SCRIPTS_HINT)
        return discovered

    def _listing_path(self, scripts_dir):
        if self.base_dir is None or os.path.isabs(scripts_dir):
            return scripts_dir
        return os.path.join(self.base_dir, scripts_dir)

    def scan_directory(self, scripts_dir) -> List[MenuOption]:
        try:
            entries = sorted(os.scandir(self._listing_path(scripts_dir)), key=lambda entry: entry.name)
        except OSError as e:
            # Le cartelle opzionali possono non esistere ancora
            logger.debug(f"Cartella script ignorata {scripts_dir}: {e}")
            return []

        prefix = self.tier_prefixes.get(os.path.basename(os.path.normpath(scripts_dir)), "")
        options = []
        for entry in entries:
            if entry.name in self.reserved_names or _is_dir(entry) or not is_executable(entry.path):
                continue

            name = os.path.splitext(entry.name)[0]
            options.append(MenuOption.from_script(
                prefix + name,
                invocation_path(scripts_dir, entry.name),
                self.os_keys,
            ))
        return options


def invocation_path(scripts_dir, file_name):
    """Percorso di invocazione esplicitamente relativo alla cartella corrente"""
    joined = os.path.normpath(os.path.join(scripts_dir, file_name)).replace(os.sep, "/")
    if os.path.isabs(scripts_dir):
        return joined
    return "./" + joined


def _is_dir(entry):
    try:
        return entry.is_dir()
    except OSError:
        return False


def discover(directories, tier_prefixes=None) -> List[MenuOption]:
    """Scorciatoia funzionale per ScriptRepository(...).discover()"""
    return ScriptRepository(directories, tier_prefixes=tier_prefixes).discover()
