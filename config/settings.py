#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import LOG_LEVEL


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None  # None = console only

    # ========== Arabic shaping ==========
    # Passed through to arabic_reshaper.ArabicReshaper
    arabic_delete_harakat: bool = True
    arabic_delete_tatweel: bool = False
    arabic_support_ligatures: bool = True

    class Config:
        env_prefix = "AIO_TRANSLATOR_"
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    def get_reshaper_config(self) -> dict:
        """Get the configuration dict for ArabicReshaper"""
        return {
            "delete_harakat": self.arabic_delete_harakat,
            "delete_tatweel": self.arabic_delete_tatweel,
            "support_ligatures": self.arabic_support_ligatures,
        }


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
