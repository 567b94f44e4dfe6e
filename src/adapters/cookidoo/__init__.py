"""Adaptadores de la API Cookidoo.

Por qué un paquete:
- Agrupa el cliente de tokens, el repositorio de la lista y los modelos de wire.
- Cada módulo implementa un contrato de `core.interfaces`.
"""

from adapters.cookidoo.auth import CookidooAuthClient
from adapters.cookidoo.shopping_list import CookidooShoppingListRepository

__all__ = [
	"CookidooAuthClient",
	"CookidooShoppingListRepository",
]
