"""
============================================================
 File: os_key.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Risoluzione della chiave del sistema operativo usata
     per scegliere il comando di una voce di menu.
============================================================
"""

import platform

OS_MAPPINGS = {
    "darwin": "mac",
}


def resolve_os_key(host_os: str) -> str:
    """Chiave di menu per l'identificativo di sistema; i valori non mappati passano invariati"""
    return OS_MAPPINGS.get(host_os, host_os)


def current_os_key() -> str:
    return resolve_os_key(platform.system().lower())
