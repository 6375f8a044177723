"""Darstellung: Formatierung, Text-Renderer und Textual-App."""
