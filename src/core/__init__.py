"""Core de la skill: dominio, contratos, servicios y configuración."""
