"""Playlists of solfège songs: load from CSV, play as text, count notes and edit."""

__version__ = "0.1.0"
__all__ = ["__version__"]