"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Package principale di cmdy, launcher interattivo di comandi
e script basato su fzf.
============================================================
"""

__version__ = "1.0.0"
