"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Impostazioni centralizzate di cmdy. I valori di default
     sono definiti qui; l'oggetto Settings viene costruito una
     sola volta all'avvio (vedi ConfigManager) e passato ai
     componenti, che non leggono mai variabili globali.
============================================================
"""

from pathlib import Path
from typing import Dict, List, Optional

# Cartelle
CONFIG_DIR = "~/.config/cmdy"
CONFIG_FILE = "config.yaml"
SCRIPTS_DIR_EXAMPLES = "scripts/examples"
SCRIPTS_DIR_USER = "scripts/user"
SCRIPTS_DIR_LEGACY = "scripts"

# Prefissi delle voci scoperte
PREFIX_EXAMPLE = "[example] "
PREFIX_USER = "[user] "

# Comandi esterni
FZF_COMMAND = "fzf"
FZF_HEADER = "Select an option:"
FZF_OPTIONS = "--height=~50% --layout=reverse"
SHELL_COMMAND = "sh -c"

RESERVED_NAMES = ("README.md",)
EDITOR_CANDIDATES = ("nano", "vi", "vim", "emacs", "code", "notepad")

REPO_URL = "https://github.com/jdpierce21/cmdy"
FZF_INSTALL_URL = "https://github.com/junegunn/fzf#installation"

# Sistemi operativi per cui una voce scoperta registra il proprio comando
OS_KEYS = ("linux", "mac", "windows")


class Settings:
    """Configurazione esplicita dell'applicazione"""

    def __init__(
        self,
        config_dir: Path = Path(CONFIG_DIR).expanduser(),
        work_dir: Optional[Path] = None,
        config_file: str = CONFIG_FILE,
        scripts_dir_examples: str = SCRIPTS_DIR_EXAMPLES,
        scripts_dir_user: str = SCRIPTS_DIR_USER,
        scripts_dir_legacy: str = SCRIPTS_DIR_LEGACY,
        prefix_example: str = PREFIX_EXAMPLE,
        prefix_user: str = PREFIX_USER,
        fzf_command: str = FZF_COMMAND,
        fzf_header: str = FZF_HEADER,
        fzf_options: str = FZF_OPTIONS,
        shell_command: str = SHELL_COMMAND,
        reserved_names=RESERVED_NAMES,
        editor_candidates=EDITOR_CANDIDATES,
        logs_dir: Optional[Path] = None,
        log_level: str = "WARNING",
        debug: bool = False,
        repo_url: str = REPO_URL,
        fzf_install_url: str = FZF_INSTALL_URL,
    ):
        self.config_dir = Path(config_dir)
        self.work_dir = Path(work_dir) if work_dir is not None else self.config_dir
        self.config_file = config_file
        self.scripts_dir_examples = scripts_dir_examples
        self.scripts_dir_user = scripts_dir_user
        self.scripts_dir_legacy = scripts_dir_legacy
        self.prefix_example = prefix_example
        self.prefix_user = prefix_user
        self.fzf_command = fzf_command
        self.fzf_header = fzf_header
        self.fzf_options = fzf_options
        self.shell_command = shell_command
        self.reserved_names = tuple(reserved_names)
        self.editor_candidates = tuple(editor_candidates)
        self.logs_dir = Path(logs_dir) if logs_dir is not None else self.config_dir / "logs"
        self.log_level = log_level.upper()
        self.debug = debug
        self.repo_url = repo_url
        self.fzf_install_url = fzf_install_url

    @property
    def script_dirs(self) -> List[str]:
        """Cartelle degli script in ordine di scansione (examples, user, legacy)"""
        return [self.scripts_dir_examples, self.scripts_dir_user, self.scripts_dir_legacy]

    @property
    def script_prefixes(self) -> List[str]:
        """Prefissi che identificano un comando come script di una cartella nota"""
        return ["./" + d for d in self.script_dirs]

    @property
    def tier_prefixes(self) -> Dict[str, str]:
        """Prefisso di visualizzazione in base al nome della cartella"""
        return {"examples": self.prefix_example, "user": self.prefix_user}

    @property
    def config_path(self) -> Path:
        return self.work_dir / self.config_file

    @property
    def version_file(self) -> Path:
        return self.config_dir / "version.json"

    def __repr__(self):
        return f"Settings(work_dir={str(self.work_dir)!r}, config_file={self.config_file!r})"
