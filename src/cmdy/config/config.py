"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Gestione della configurazione centralizzata dell'applicazione.
Combina i default di settings.py, un config.ini opzionale e le
variabili d'ambiente CMDY_* e produce un unico oggetto Settings
da passare ai componenti.
============================================================
"""

import configparser
import os
from pathlib import Path
from typing import Mapping, Optional

from cmdy.config import settings as defaults
from cmdy.config.settings import Settings
from cmdy.errors import ConfigParseError
from cmdy.utils.logger import logger

# chiave Settings -> (sezione ini, opzione ini, variabile d'ambiente)
SETTING_SOURCES = {
    "config_file": ("PATHS", "config_file", "CMDY_CONFIG_FILE"),
    "scripts_dir_examples": ("PATHS", "scripts_examples", "CMDY_SCRIPTS_EXAMPLES"),
    "scripts_dir_user": ("PATHS", "scripts_user", "CMDY_SCRIPTS_USER"),
    "scripts_dir_legacy": ("PATHS", "scripts_legacy", "CMDY_SCRIPTS_LEGACY"),
    "prefix_example": ("MENU", "prefix_example", "CMDY_PREFIX_EXAMPLE"),
    "prefix_user": ("MENU", "prefix_user", "CMDY_PREFIX_USER"),
    "fzf_command": ("MENU", "fzf_command", "CMDY_FZF_BINARY"),
    "fzf_header": ("MENU", "fzf_header", "CMDY_FZF_HEADER"),
    "fzf_options": ("MENU", "fzf_options", "CMDY_FZF_OPTIONS"),
    "shell_command": ("MENU", "shell_command", "CMDY_SHELL_COMMAND"),
    "log_level": ("APP", "log_level", "CMDY_LOG_LEVEL"),
}

TRUE_VALUES = {"1", "true", "yes", "on"}


class ConfigManager:
    """Costruisce l'oggetto Settings a partire da default, config.ini e ambiente"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, cwd: Optional[Path] = None):
        self._environ = dict(os.environ if environ is None else environ)
        self._cwd = Path(cwd) if cwd is not None else Path.cwd()
        self._config = configparser.ConfigParser(interpolation=None)
        self.config_dir = Path(self._env("CMDY_CONFIG_DIR") or defaults.CONFIG_DIR).expanduser()
        self._config_path = self._find_config_file()

        if self._config_path:
            logger.debug(f"Config trovato: {self._config_path}")
            try:
                self._config.read(self._config_path, encoding="utf-8")
            except (configparser.Error, UnicodeDecodeError) as e:
                raise ConfigParseError(
                    f"Error: Invalid settings in {self._config_path} ({e})",
                    solutions=["Fix or remove config.ini and try again"],
                ) from e
        else:
            logger.debug("config.ini non trovato, usando defaults")

    def _env(self, name):
        """Variabile d'ambiente, None se assente o vuota"""
        value = self._environ.get(name, "")
        return value if value != "" else None

    def _find_config_file(self):
        """Cerca il file config.ini in varie locazioni"""
        for candidate in (self.config_dir / "config.ini", self._cwd / "config.ini"):
            if candidate.is_file():
                return candidate
        return None

    def get(self, section, key, fallback=None):
        """Ottiene un valore dalla configurazione"""
        try:
            return self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def get_int(self, section, key, fallback=None):
        """Ottiene un valore intero dalla configurazione"""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key, relative_to=None):
        """Ottiene un percorso, opzionalmente relativo a una cartella"""
        path_str = self.get(section, key)
        if not path_str:
            return None
        return self._as_path(path_str, relative_to)

    @staticmethod
    def _as_path(raw, relative_to=None):
        path = Path(raw).expanduser()
        if path.is_absolute() or relative_to is None:
            return path
        return Path(relative_to) / path

    def resolve_work_dir(self, config_file, override=None):
        """
        Determina la cartella di lavoro che contiene config.yaml e scripts/

        Ordine: override esplicito, CMDY_CONFIG_DIR, cartella corrente se
        contiene il file di menu, altrimenti la cartella di configurazione.
        """
        if override is not None:
            return Path(override).expanduser()
        if self._env("CMDY_CONFIG_DIR"):
            return self.config_dir
        if (self._cwd / config_file).is_file():
            return self._cwd
        return self.config_dir

    def load(self, work_dir=None, debug=None) -> Settings:
        """
        Costruisce l'oggetto Settings

        Args:
            work_dir: Cartella di lavoro esplicita (opzione --dir)
            debug: Forza la modalità debug (opzione --debug)

        Returns:
            Settings pronto da passare ai componenti
        """
        values = {}
        for name, (section, key, env_name) in SETTING_SOURCES.items():
            value = self._env(env_name)
            if value is None:
                value = self.get(section, key)
            if value is not None:
                values[name] = value

        logs_dir = self._env("CMDY_LOGS_DIR")
        if logs_dir:
            values["logs_dir"] = self._as_path(logs_dir, self.config_dir)
        else:
            logs_dir = self.get_path("PATHS", "logs_directory", self.config_dir)
            if logs_dir is not None:
                values["logs_dir"] = logs_dir

        debug_env = self._env("CMDY_DEBUG")
        if debug_env is not None:
            values["debug"] = debug_env.strip().lower() in TRUE_VALUES
        else:
            values["debug"] = self.get_bool("APP", "debug", False)
        if debug:
            values["debug"] = True

        config_file = values.get("config_file", defaults.CONFIG_FILE)
        settings = Settings(
            config_dir=self.config_dir,
            work_dir=self.resolve_work_dir(config_file, work_dir),
            **values,
        )
        logger.debug(f"Settings caricati: {settings!r}")
        return settings

    @property
    def config_file(self):
        """Percorso del config.ini usato (None se assente)"""
        return self._config_path
