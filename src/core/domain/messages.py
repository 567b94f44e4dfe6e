"""Catálogo de textos hablados por idioma.

Ningún texto interpola errores internos; solo el nombre del artículo.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.domain.language import Language


@dataclass(frozen=True)
class SpokenMessages:
    welcome: str
    help: str
    goodbye: str
    unknown: str
    item_added: str
    missing_item: str
    name_too_long: str
    add_failed: str
    internal_error: str

    def added(self, item_name: str) -> str:
        return self.item_added.format(item=item_name)


_GERMAN = SpokenMessages(
    welcome=(
        "Willkommen bei der Cookidoo Einkaufsliste. "
        "Du kannst Artikel hinzufügen, indem du zum Beispiel sagst: Füge Milch hinzu."
    ),
    help=(
        "Du kannst Artikel zu deiner Cookidoo Einkaufsliste hinzufügen. "
        "Sage zum Beispiel: Füge Milch hinzu, oder: Ich brauche Eier. "
        "Was möchtest du hinzufügen?"
    ),
    goodbye="Auf Wiedersehen!",
    unknown="Das habe ich leider nicht verstanden. Bitte sage zum Beispiel: Füge Milch hinzu.",
    item_added="{item} wurde zur Einkaufsliste hinzugefügt.",
    missing_item=(
        "Ich habe leider nicht verstanden, welchen Artikel ich hinzufügen soll. "
        "Bitte sage zum Beispiel: Füge Milch hinzu."
    ),
    name_too_long="Der Artikelname ist zu lang. Bitte versuche es mit einem kürzeren Namen.",
    add_failed=(
        "Der Artikel konnte leider nicht hinzugefügt werden. "
        "Bitte versuche es später erneut."
    ),
    internal_error="Entschuldigung, da ist etwas schiefgelaufen. Bitte versuche es später erneut.",
)

_ENGLISH = SpokenMessages(
    welcome=(
        "Welcome to the Cookidoo shopping list. "
        "You can add items by saying, for example: add milk."
    ),
    help=(
        "You can add items to your Cookidoo shopping list. "
        "For example, say: add milk, or: I need eggs. "
        "What would you like to add?"
    ),
    goodbye="Goodbye!",
    unknown="Sorry, I didn't get that. Try saying, for example: add milk.",
    item_added="{item} was added to your shopping list.",
    missing_item=(
        "Sorry, I didn't catch which item to add. "
        "Try saying, for example: add milk."
    ),
    name_too_long="That item name is too long. Please try a shorter name.",
    add_failed="Sorry, the item could not be added. Please try again later.",
    internal_error="Sorry, something went wrong. Please try again later.",
)

_CATALOG: dict[Language, SpokenMessages] = {
    Language.GERMAN: _GERMAN,
    Language.ENGLISH: _ENGLISH,
}


def messages_for(language: Language) -> SpokenMessages:
    return _CATALOG.get(language, _GERMAN)
