"""Servicios del Core (motor de conversión)."""
