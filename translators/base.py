"""
Base Translator - Capability Contract
AIO Translator - Multi-Backend Support

A backend exposes exactly one execution model per call, either blocking
or asynchronous, through a Capability returned by capability() /
capability_mut(). Decorators check the inner capability at every call and
present the same model to their own callers.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Any, Union, TYPE_CHECKING
from dataclasses import dataclass
from enum import Enum

from .errors import CapabilityError

if TYPE_CHECKING:
    from core.language import Language


class CapabilityKind(Enum):
    """Execution models a translator can expose"""
    BLOCKING = "blocking"
    ASYNC = "async"


@dataclass
class TranslationOutput:
    """Translation result containing the translation and the detected language"""
    text: str
    lang: Optional["Language"] = None


@dataclass
class TranslationListOutput:
    """Batch translation result, one entry per query, in query order"""
    text: List[str]
    lang: Optional["Language"] = None


class BlockingTranslator(ABC):
    """Translate calls that block the calling thread."""

    @abstractmethod
    def translate(
        self,
        query: str,
        context: Optional[Any],
        from_lang: Optional["Language"],
        to_lang: "Language",
    ) -> str:
        """
        Translate a single string.

        Args:
            query: Text to translate
            context: Opaque pass-through value (e.g. a prompt builder)
            from_lang: Source language, None if unknown
            to_lang: Target language

        Returns:
            Translated text

        Raises:
            TranslatorError: If the backend fails
        """
        pass

    @abstractmethod
    def translate_batch(
        self,
        queries: List[str],
        context: Optional[Any],
        from_lang: Optional["Language"],
        to_lang: "Language",
    ) -> List[str]:
        """Translate an ordered batch; one result per query, same order."""
        pass


class AsyncTranslator(ABC):
    """Translate calls that suspend the calling task."""

    @abstractmethod
    async def translate(
        self,
        query: str,
        context: Optional[Any],
        from_lang: Optional["Language"],
        to_lang: "Language",
    ) -> TranslationOutput:
        """
        Translate a single string.

        Returns:
            TranslationOutput with the text and, if the backend reports it,
            the detected source language
        """
        pass

    @abstractmethod
    async def translate_batch(
        self,
        queries: List[str],
        context: Optional[Any],
        from_lang: Optional["Language"],
        to_lang: "Language",
    ) -> TranslationListOutput:
        pass


@dataclass(frozen=True)
class Capability:
    """
    Tagged reference to the active execution model of a translator.

    Holds exactly one of a BlockingTranslator or an AsyncTranslator.
    Obtained fresh on every call; do not keep it around.
    """
    kind: CapabilityKind
    target: Union[BlockingTranslator, AsyncTranslator]

    def __post_init__(self):
        expected = BlockingTranslator if self.kind is CapabilityKind.BLOCKING else AsyncTranslator
        if not isinstance(self.target, expected):
            raise CapabilityError(
                f"{type(self.target).__name__} is not a {expected.__name__}"
            )

    @classmethod
    def blocking(cls, target: BlockingTranslator) -> "Capability":
        return cls(CapabilityKind.BLOCKING, target)

    @classmethod
    def asynchronous(cls, target: AsyncTranslator) -> "Capability":
        return cls(CapabilityKind.ASYNC, target)

    @property
    def is_blocking(self) -> bool:
        return self.kind is CapabilityKind.BLOCKING

    @property
    def is_async(self) -> bool:
        return self.kind is CapabilityKind.ASYNC

    def as_blocking(self) -> Optional[BlockingTranslator]:
        return self.target if self.is_blocking else None

    def as_async(self) -> Optional[AsyncTranslator]:
        return self.target if self.is_async else None


class Translator(ABC):
    """
    Abstract base class for translation backends.
    All backends must implement these methods.
    """

    @abstractmethod
    def local(self) -> bool:
        """Whether translation runs without a network round trip"""
        pass

    @abstractmethod
    def capability(self) -> Capability:
        """Return the active execution model"""
        pass

    def capability_mut(self) -> Capability:
        """Return the active execution model for calls that mutate the backend"""
        return self.capability()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} local={self.local()}>"
