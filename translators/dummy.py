"""
Dummy translators that need neither a network nor a model.
"""

from typing import Any, List, Optional

from .base import BlockingTranslator, Capability, Translator


class NoneTranslator(Translator, BlockingTranslator):
    """Translates everything to nothing"""

    def local(self) -> bool:
        return True

    def capability(self) -> Capability:
        return Capability.blocking(self)

    def translate(self, query: str, context: Optional[Any], from_lang, to_lang) -> str:
        return ""

    def translate_batch(
        self, queries: List[str], context: Optional[Any], from_lang, to_lang
    ) -> List[str]:
        return ["" for _ in queries]


class OriginalTranslator(Translator, BlockingTranslator):
    """Returns the input untouched"""

    def local(self) -> bool:
        return True

    def capability(self) -> Capability:
        return Capability.blocking(self)

    def translate(self, query: str, context: Optional[Any], from_lang, to_lang) -> str:
        return query

    def translate_batch(
        self, queries: List[str], context: Optional[Any], from_lang, to_lang
    ) -> List[str]:
        return list(queries)
