"""
============================================================
 File: version.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Informazioni di versione: versione del pacchetto,
     dati di installazione da version.json e, in mancanza
     del pacchetto installato, l'hash git corrente.
============================================================
"""

import subprocess
from datetime import datetime
from importlib import metadata

from cmdy.utils.file_loader import load_json
from cmdy.utils.logger import logger

PACKAGE_NAME = "cmdy"
VERSION_UNKNOWN = "Version: unknown (not in git repo)"


def package_version():
    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return None


def installed_version_info(version_file):
    """Contenuto di version.json (build_hash, build_date, install_date) o None"""
    info = load_json(version_file)
    return info if isinstance(info, dict) else None


def git_short_hash():
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
        )
    except OSError as e:
        logger.debug(f"git non disponibile: {e}")
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def format_install_date(raw):
    try:
        return datetime.fromisoformat(str(raw).replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return str(raw)


def version_lines(version_file):
    """Righe da stampare per "cmdy version" """
    version = package_version()
    if version is None:
        short_hash = git_short_hash()
        if short_hash is None:
            return [VERSION_UNKNOWN]
        return [f"cmdy version: {short_hash} (from git)"]

    lines = [f"cmdy version: {version}"]
    info = installed_version_info(version_file)
    if info:
        if info.get("build_date"):
            lines.append(f"Built: {info['build_date']}")
        if info.get("install_date"):
            lines.append(f"Installed: {format_install_date(info['install_date'])}")
    return lines
