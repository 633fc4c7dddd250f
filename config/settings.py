#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from pydantic_settings import BaseSettings

from .constants import (
    TOC_MODES,
    CONTINUATION_MODES,
    SUPPORTED_LANGUAGES,
    DEFAULT_LANGUAGE,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== Branding ==========
    app_name: str = "Vade Mecum Estatístico"

    # ========== Rendering ==========
    language: str = DEFAULT_LANGUAGE  # pt | en
    toc_mode: str = "exact"  # exact | estimate
    continuation_markers: str = "long_only"  # long_only | always

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / "data" / "output"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        env_prefix = "VADEMECUM_"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def validate_choices(self) -> None:
        """Raise ValueError when an enumerated setting holds an unknown value"""
        if self.language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {self.language}")
        if self.toc_mode not in TOC_MODES:
            raise ValueError(f"Unsupported TOC mode: {self.toc_mode}")
        if self.continuation_markers not in CONTINUATION_MODES:
            raise ValueError(f"Unsupported continuation mode: {self.continuation_markers}")

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "="*70)
        print("CONFIGURATION")
        print("="*70)
        print(f"Language:        {self.language}")
        print(f"TOC Mode:        {self.toc_mode}")
        print(f"Continuations:   {self.continuation_markers}")
        print(f"Output Dir:      {self.output_dir}")
        print("="*70 + "\n")


# Global settings instance
settings = Settings()
