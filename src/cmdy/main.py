"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Entry point principale di cmdy. Senza argomenti costruisce
il menu (config.yaml + script scoperti) e avvia il ciclo di
selezione; i sottocomandi version, config e help sono
utilità indipendenti.

Qui si trova anche l'unico gestore degli errori fatali, che
decide l'exit code del processo.
============================================================
"""

import os
import subprocess
import sys

import click
from rich.console import Console
from rich.markup import escape

from cmdy.config.config import ConfigManager
from cmdy.db.menu_config import load_menu_options
from cmdy.db.script_repository import ScriptRepository
from cmdy.errors import CmdyError
from cmdy.menu.dispatcher import CommandDispatcher
from cmdy.menu.option_merger import merge_options
from cmdy.menu.selector import FzfSelector
from cmdy.menu.tool_menu import ToolMenu
from cmdy.utils.editor import find_editor
from cmdy.utils.logger import logger, setup_logging
from cmdy.utils.version import version_lines

console = Console()

APP_TITLE = "cmdy - Modern CLI Command Assistant"

LOGO_LINES = [
    "  ██████╗ ███╗   ███╗ ██████╗  ██╗   ██╗",
    " ██╔════╝ ████╗ ████║ ██╔══██╗ ╚██╗ ██╔╝",
    " ██║      ██╔████╔██║ ██║  ██║  ╚████╔╝ ",
    " ██║      ██║╚██╔╝██║ ██║  ██║   ╚██╔╝  ",
    " ╚██████╗ ██║ ╚═╝ ██║ ██████╔╝    ██║   ",
    "  ╚═════╝ ╚═╝     ╚═╝ ╚═════╝     ╚═╝   ",
]

USAGE = """Usage:
  cmdy               Run interactive menu
  cmdy version       Show current version
  cmdy config        Edit config file
  cmdy help          Show this help"""


def print_error(error: CmdyError):
    console.print(f"[bold red]{escape(error.message)}[/bold red]")
    if error.solutions:
        console.print("")
        console.print("Solutions:")
        for idx, solution in enumerate(error.solutions, start=1):
            console.print(f"{idx}. {solution}", markup=False)


def show_usage():
    console.print("\n".join(LOGO_LINES), style="blue", markup=False)
    console.print(APP_TITLE)
    console.print("")
    console.print(USAGE, markup=False)


def build_menu(settings):
    """Voci dichiarate + script scoperti, già deduplicati"""
    declared = load_menu_options(settings.config_path, repo_url=settings.repo_url)
    discovered = ScriptRepository.from_settings(settings, console=console).discover()
    return merge_options(declared, discovered, settings.script_prefixes)


def run_interactive_menu(settings):
    options = build_menu(settings)
    selector = FzfSelector(
        command=settings.fzf_command,
        header=settings.fzf_header,
        options=settings.fzf_options,
        console=console,
        install_url=settings.fzf_install_url,
    )
    dispatcher = CommandDispatcher(settings.shell_command, console=console, cwd=settings.work_dir)
    menu = ToolMenu(options, selector, dispatcher, repo_url=settings.repo_url)
    return menu.start()


@click.group(invoke_without_command=True, context_settings={"help_option_names": []})
@click.option("--dir", "work_dir", type=click.Path(file_okay=False), help="Directory with config.yaml and scripts/.")
@click.option("--debug", is_flag=True, help="Verbose logging.")
@click.option("-h", "--help", "show_help", is_flag=True, help="Show this help.")
@click.pass_context
def cli(ctx, work_dir, debug, show_help):
    settings = ConfigManager().load(work_dir=work_dir, debug=debug)
    setup_logging(settings)
    ctx.obj = settings

    if show_help:
        show_usage()
        return
    if ctx.invoked_subcommand is None:
        logger.info(f"Avvio menu in {settings.work_dir}")
        run_interactive_menu(settings)


@cli.command()
@click.pass_obj
def version(settings):
    """Show current version."""
    for line in version_lines(settings.version_file):
        console.print(line, markup=False)


@cli.command()
@click.pass_obj
def config(settings):
    """Edit config file."""
    config_path = settings.config_path
    try:
        editor = find_editor(settings.editor_candidates, os.environ, console=console)
    except CmdyError as e:
        # Non fatale: l'utente può modificare il file a mano
        print_error(e)
        return

    console.print(f"Opening {config_path} with {editor}...", markup=False)
    try:
        result = subprocess.run([editor, str(config_path)])
    except OSError as e:
        console.print(f"[red]Editor failed: {escape(str(e))}[/red]")
        return
    if result.returncode != 0:
        console.print(f"[red]Editor failed: exit status {result.returncode}[/red]")


@cli.command(name="help")
def help_command():
    """Show this help."""
    show_usage()


def main(argv=None):
    try:
        cli.main(args=argv, prog_name="cmdy", standalone_mode=False)
    except CmdyError as e:
        logger.info(e.message)
        print_error(e)
        sys.exit(e.exit_code)
    except click.exceptions.Abort:
        sys.exit(130)
    except click.ClickException as e:
        e.show()
        show_usage()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logger.debug(f"Errore imprevisto: {e}", exc_info=True)
        console.print(f"[bold red]Unexpected error: {escape(str(e))}[/bold red]")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
