"""Parsing of language identifiers and module-level language queries.

Identifiers are canonical language names (``"English"``), ISO 639-1 codes
(``"en"``) or ISO 639-3 codes (``"eng"``). Lookup is an exact match against
tables built from the languages the engine supports; ASCII case is ignored,
nothing else is normalized.
"""

from typing import Callable, Dict, FrozenSet, Iterable, List, Union

from lingua import Language

from linguakit.core.interfaces import IdentifierKind, InvalidArgumentError, Script


# Languages written in exactly one script that no other supported language uses,
# keyed by script. Japanese is absent: it mixes Hiragana, Katakana and Han.
SINGLE_UNIQUE_SCRIPTS = {
    'Armenian': 'Armenian',
    'Bengali': 'Bengali',
    'Georgian': 'Georgian',
    'Greek': 'Greek',
    'Gujarati': 'Gujarati',
    'Gurmukhi': 'Punjabi',
    'Hangul': 'Korean',
    'Hebrew': 'Hebrew',
    'Tamil': 'Tamil',
    'Telugu': 'Telugu',
    'Thai': 'Thai',
}

_SCRIPT_QUERIES: Dict[Script, Callable[[], FrozenSet[Language]]] = {
    Script.ARABIC: Language.all_with_arabic_script,
    Script.CYRILLIC: Language.all_with_cyrillic_script,
    Script.DEVANAGARI: Language.all_with_devanagari_script,
    Script.LATIN: Language.all_with_latin_script,
}

# (empty list message, unknown token prefix) per identifier kind
_KIND_MESSAGES = {
    IdentifierKind.NAME: ("languages list must not be empty", "unknown language"),
    IdentifierKind.ISO_639_1: ("ISO 639-1 codes list must not be empty", "unknown ISO 639-1 code"),
    IdentifierKind.ISO_639_3: ("ISO 639-3 codes list must not be empty", "unknown ISO 639-3 code"),
}


def canonical_name(language: Language) -> str:
    """Return the canonical display name of an engine language."""
    return language.name.capitalize()


def _build_lookup_tables() -> Dict[IdentifierKind, Dict[str, Language]]:
    tables = {kind: {} for kind in IdentifierKind}
    for language in Language.all():
        tables[IdentifierKind.NAME][canonical_name(language).lower()] = language
        tables[IdentifierKind.ISO_639_1][language.iso_code_639_1.name.lower()] = language
        tables[IdentifierKind.ISO_639_3][language.iso_code_639_3.name.lower()] = language
    return tables


_LOOKUP_TABLES = _build_lookup_tables()


def _lookup(value, kind: IdentifierKind):
    if kind is IdentifierKind.NAME and isinstance(value, Language):
        return value
    if not isinstance(value, str) or not value.isascii():
        return None
    return _LOOKUP_TABLES[kind].get(value.lower())


def ensure_list(values, what: str) -> list:
    """Materialize an iterable argument, rejecting a bare string."""
    if isinstance(values, (str, bytes)):
        raise InvalidArgumentError(f"{what} must be a list, not a single string")
    try:
        return list(values)
    except TypeError:
        raise InvalidArgumentError(f"{what} must be a list, got {type(values).__name__}")


def parse_identifiers(values: Iterable[str], kind: IdentifierKind = IdentifierKind.NAME) -> List[Language]:
    """Convert identifiers of one kind to engine languages.

    Input order is preserved and duplicates are kept.

    Args:
        values: Language names, ISO 639-1 codes or ISO 639-3 codes
        kind: Which kind of identifier ``values`` holds

    Returns:
        List of engine ``Language`` values

    Raises:
        InvalidArgumentError: If the list is empty or a token is unknown
    """
    kind = IdentifierKind(kind)
    empty_message, unknown_prefix = _KIND_MESSAGES[kind]
    values = ensure_list(values, "identifiers")

    if not values:
        raise InvalidArgumentError(empty_message)

    languages = []
    for value in values:
        language = _lookup(value, kind)
        if language is None:
            raise InvalidArgumentError(f"{unknown_prefix}: {value}")
        languages.append(language)

    return languages


def parse_languages(values: Iterable[str]) -> List[Language]:
    return parse_identifiers(values, IdentifierKind.NAME)


def parse_iso_codes_639_1(values: Iterable[str]) -> List[Language]:
    return parse_identifiers(values, IdentifierKind.ISO_639_1)


def parse_iso_codes_639_3(values: Iterable[str]) -> List[Language]:
    return parse_identifiers(values, IdentifierKind.ISO_639_3)


def parse_language(value) -> Language:
    """Parse a single language given as a name or an engine ``Language``."""
    if isinstance(value, Language):
        return value

    name = str(value)
    language = _lookup(name, IdentifierKind.NAME)
    if language is None:
        raise InvalidArgumentError(f"unknown language: {name}")
    return language


def parse_script(value: Union[Script, str]) -> Script:
    """Parse a script given as a ``Script`` member or its name."""
    if isinstance(value, Script):
        return value
    if isinstance(value, str) and value.isascii():
        try:
            return Script(value.lower())
        except ValueError:
            pass
    choices = ", ".join(script.value for script in Script)
    raise InvalidArgumentError(f"unknown script: {value} (expected one of: {choices})")


# Engine language sets

def all_language_set() -> FrozenSet[Language]:
    return frozenset(Language.all())


def spoken_language_set() -> FrozenSet[Language]:
    return frozenset(Language.all_spoken_ones())


def script_language_set(script: Union[Script, str]) -> FrozenSet[Language]:
    return frozenset(_SCRIPT_QUERIES[parse_script(script)]())


def single_unique_script_language_set() -> FrozenSet[Language]:
    names = {name.lower() for name in SINGLE_UNIQUE_SCRIPTS.values()}
    table = _LOOKUP_TABLES[IdentifierKind.NAME]
    return frozenset(table[name] for name in names if name in table)


def sorted_names(languages: Iterable[Language]) -> List[str]:
    """Canonical names of ``languages``, deduplicated and sorted."""
    return sorted({canonical_name(language) for language in languages})


# Module-level queries returning sorted canonical names

def languages() -> List[str]:
    """All supported languages."""
    return sorted_names(all_language_set())


def spoken_languages() -> List[str]:
    """All supported languages that are still spoken."""
    return sorted_names(spoken_language_set())


def languages_with_script(script: Union[Script, str]) -> List[str]:
    """All supported languages written in ``script``."""
    return sorted_names(script_language_set(script))


def languages_with_arabic_script() -> List[str]:
    return languages_with_script(Script.ARABIC)


def languages_with_cyrillic_script() -> List[str]:
    return languages_with_script(Script.CYRILLIC)


def languages_with_devanagari_script() -> List[str]:
    return languages_with_script(Script.DEVANAGARI)


def languages_with_latin_script() -> List[str]:
    return languages_with_script(Script.LATIN)


def languages_with_single_unique_script() -> List[str]:
    """Languages whose script no other supported language uses."""
    return sorted_names(single_unique_script_language_set())
