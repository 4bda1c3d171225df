"""
============================================================
 File: menu_option.py
 Author: Internal Systems Automation Team
 Created: 2026-10-19

 Description:
     Modello dati che rappresenta una voce del menu. Incapsula
     il nome visualizzato e la mappa sistema operativo ->
     comando shell. Le voci scoperte dalle cartelle degli
     script registrano anche il percorso di invocazione.
============================================================
"""

from types import MappingProxyType

DECLARED = "declared"
DISCOVERED = "discovered"


class MenuOption:
    __slots__ = ("display", "commands", "origin", "script_path")

    def __init__(self, display, commands, origin=DECLARED, script_path=None):
        self.display = display
        self.commands = MappingProxyType(dict(commands))
        self.origin = origin
        self.script_path = script_path

    @classmethod
    def from_script(cls, display, script_path, os_keys):
        """Voce scoperta: lo stesso percorso per ogni sistema operativo"""
        return cls(
            display,
            {key: script_path for key in os_keys},
            origin=DISCOVERED,
            script_path=script_path,
        )

    def command_for(self, os_key):
        """Comando per il sistema indicato, None se non configurato"""
        return self.commands.get(os_key)

    def __eq__(self, other):
        if not isinstance(other, MenuOption):
            return NotImplemented
        return (self.display, dict(self.commands)) == (other.display, dict(other.commands))

    def __hash__(self):
        return hash((self.display, tuple(sorted(self.commands.items()))))

    def __repr__(self):
        return f"MenuOption(display={self.display!r}, commands={dict(self.commands)!r})"
