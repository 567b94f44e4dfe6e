"""Servicios del Core: token manager, caso de uso add-item y cableado."""
