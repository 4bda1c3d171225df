"""
============================================================
 File: dispatcher.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Esecuzione dei comandi scelti dal menu tramite la shell
     di sistema. Lo script eredita stdin/stdout/stderr del
     terminale; un fallimento viene segnalato ma non termina
     mai il launcher.
============================================================
"""

import shlex
import subprocess

from rich.console import Console
from rich.markup import escape

from cmdy.utils.logger import logger


class CommandDispatcher:
    def __init__(self, shell_command="sh -c", console=None, cwd=None):
        self.shell_prefix = shlex.split(shell_command)
        self.cwd = cwd
        self.console = console or Console()

    def build_argv(self, command):
        """Prefisso della shell seguito dal comando come unico argomento"""
        return [*self.shell_prefix, command]

    def dispatch(self, command) -> bool:
        """Esegue il comando e attende la fine; False se è fallito"""
        argv = self.build_argv(command)
        logger.info(f"Executing: {argv}")
        try:
            result = subprocess.run(argv, cwd=self.cwd)
        except OSError as e:
            logger.info(f"Avvio fallito per {command!r}: {e}")
            self.console.print(f"[red]Error: {escape(str(e))}[/red]")
            return False
        except KeyboardInterrupt:
            logger.info(f"Comando interrotto: {command!r}")
            self.console.print("[yellow]Interrupted[/yellow]")
            return False

        if result.returncode != 0:
            logger.info(f"Comando {command!r} terminato con codice {result.returncode}")
            self.console.print(f"[red]Error: exit status {result.returncode}[/red]")
            return False
        return True
