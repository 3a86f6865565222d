"""Installer commands."""
