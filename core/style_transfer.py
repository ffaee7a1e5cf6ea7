#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Style Transfer - output repair around any translator

Wraps a translator and post-processes what it returns:
- identity translation (source == target) short-circuits without a call
- valuable output goes through the repair pipeline
- batch and async output with nothing valuable in it falls back to the query

The wrapped translator's execution model is preserved: a blocking backend
yields a blocking StyleTransfer, an async backend an async one. Stacking
StyleTransfer instances keeps the innermost model.
"""

from typing import Any, List, Optional

from arabic_reshaper import ArabicReshaper

from config.logging_config import get_logger
from config.settings import Settings, get_settings
from core.language import Language
from core.postprocess import clean_translation_output, is_valuable_text
from translators.base import (
    AsyncTranslator,
    BlockingTranslator,
    Capability,
    TranslationListOutput,
    TranslationOutput,
    Translator,
)
from translators.errors import CapabilityError

logger = get_logger(__name__)


class StyleTransfer(Translator):
    """
    Translator decorator that repairs machine-translation artifacts.

    Usage:
        translator = StyleTransfer(backend)
        capability = translator.capability()
        if capability.is_async:
            out = await capability.as_async().translate(q, None, None, Language.ENGLISH)
    """

    def __init__(self, translator: Translator, settings: Optional[Settings] = None):
        """
        Args:
            translator: Backend to wrap
            settings: Source of Arabic shaping options; global settings if None
        """
        self.translator = translator
        settings = settings or get_settings()
        self._reshaper = ArabicReshaper(configuration=settings.get_reshaper_config())

    def local(self) -> bool:
        return self.translator.local()

    def capability(self) -> Capability:
        return self._mirror(self.translator.capability())

    def capability_mut(self) -> Capability:
        return self._mirror(self.translator.capability_mut())

    def _mirror(self, inner: Capability) -> Capability:
        if inner.is_async:
            return Capability.asynchronous(_AsyncStyleTransfer(self))
        return Capability.blocking(_BlockingStyleTransfer(self))

    def _inner_blocking(self) -> BlockingTranslator:
        inner = self.translator.capability_mut().as_blocking()
        if inner is None:
            raise CapabilityError(f"{self.translator!r} no longer exposes a blocking capability")
        return inner

    def _inner_async(self) -> AsyncTranslator:
        inner = self.translator.capability().as_async()
        if inner is None:
            raise CapabilityError(f"{self.translator!r} no longer exposes an async capability")
        return inner

    def repair(self, query: str, text: str, to_lang: Language) -> str:
        """Run the repair pipeline unconditionally."""
        return clean_translation_output(query, text, to_lang, self._reshaper)

    def repair_or_fallback(self, query: str, text: str, to_lang: Language) -> str:
        """Repair valuable output; otherwise return the query."""
        if is_valuable_text(text):
            return self.repair(query, text, to_lang)
        logger.debug("Discarding output with no valuable text: %r", text)
        return query

    def repair_batch(self, queries: List[str], texts: List[str], to_lang: Language) -> List[str]:
        """Apply repair_or_fallback position by position."""
        if len(texts) != len(queries):
            raise CapabilityError(
                f"{self.translator!r} returned {len(texts)} translations for {len(queries)} queries"
            )

        repaired = []
        fallbacks = 0
        for query, text in zip(queries, texts):
            if is_valuable_text(text):
                repaired.append(self.repair(query, text, to_lang))
            else:
                repaired.append(query)
                fallbacks += 1

        if fallbacks:
            logger.debug("Batch of %d: %d items fell back to the query", len(queries), fallbacks)
        return repaired

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} of {self.translator!r}>"


def _is_identity(from_lang: Optional[Language], to_lang: Language) -> bool:
    if from_lang is not None and from_lang == to_lang:
        logger.debug("Source and target are both %s, skipping translation", to_lang)
        return True
    return False


class _BlockingStyleTransfer(BlockingTranslator):
    """Blocking view of a StyleTransfer"""

    def __init__(self, owner: StyleTransfer):
        self._owner = owner

    def translate(
        self,
        query: str,
        context: Optional[Any],
        from_lang: Optional[Language],
        to_lang: Language,
    ) -> str:
        if _is_identity(from_lang, to_lang):
            return query
        text = self._owner._inner_blocking().translate(query, context, from_lang, to_lang)
        # Repaired even when nothing valuable came back, unlike every other path
        return self._owner.repair(query, text, to_lang)

    def translate_batch(
        self,
        queries: List[str],
        context: Optional[Any],
        from_lang: Optional[Language],
        to_lang: Language,
    ) -> List[str]:
        if _is_identity(from_lang, to_lang):
            return list(queries)
        texts = self._owner._inner_blocking().translate_batch(queries, context, from_lang, to_lang)
        return self._owner.repair_batch(queries, texts, to_lang)


class _AsyncStyleTransfer(AsyncTranslator):
    """Async view of a StyleTransfer"""

    def __init__(self, owner: StyleTransfer):
        self._owner = owner

    async def translate(
        self,
        query: str,
        context: Optional[Any],
        from_lang: Optional[Language],
        to_lang: Language,
    ) -> TranslationOutput:
        if _is_identity(from_lang, to_lang):
            return TranslationOutput(text=query, lang=from_lang)
        output = await self._owner._inner_async().translate(query, context, from_lang, to_lang)
        return TranslationOutput(
            text=self._owner.repair_or_fallback(query, output.text, to_lang),
            lang=output.lang,
        )

    async def translate_batch(
        self,
        queries: List[str],
        context: Optional[Any],
        from_lang: Optional[Language],
        to_lang: Language,
    ) -> TranslationListOutput:
        if _is_identity(from_lang, to_lang):
            return TranslationListOutput(text=list(queries), lang=from_lang)
        output = await self._owner._inner_async().translate_batch(queries, context, from_lang, to_lang)
        return TranslationListOutput(
            text=self._owner.repair_batch(queries, output.text, to_lang),
            lang=output.lang,
        )
