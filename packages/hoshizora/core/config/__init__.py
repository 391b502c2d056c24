"""Configuration management for hoshizora."""

from hoshizora.core.config.loader import detect_format, load_config, load_decoder_config
from hoshizora.core.config.models import DecoderConfig, ErrorPolicy, UnsupportedSectionPolicy

__all__ = [
    "DecoderConfig",
    "ErrorPolicy",
    "UnsupportedSectionPolicy",
    "detect_format",
    "load_config",
    "load_decoder_config",
]
