"""Core: dominio, configuración y motor de conversión."""
