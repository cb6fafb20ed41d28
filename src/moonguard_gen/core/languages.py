# src/moonguard_gen/core/languages.py
import logging
from typing import Iterable, List, Mapping

from moonguard_gen.errors import UnsupportedLanguageError
from moonguard_gen.models import LanguageConfig

logger = logging.getLogger(__name__)


def validate_languages(requested: Iterable[str], registry: Mapping[str, LanguageConfig]) -> None:
    """Fails on the first requested language missing from the registry."""
    for lang in requested:
        if lang not in registry:
            raise UnsupportedLanguageError(lang)
        logger.debug("language %r is supported", lang)


def supported_languages(registry: Mapping[str, LanguageConfig]) -> List[str]:
    return sorted(registry)
