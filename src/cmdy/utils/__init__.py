"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Package di utilità (logger, file, piattaforma).
============================================================
"""
