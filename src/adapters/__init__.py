"""Adaptadores concretos (Cookidoo HTTP, Alexa, logging)."""
