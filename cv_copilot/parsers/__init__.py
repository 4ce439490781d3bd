"""Text extraction and field parsing for CV Copilot."""

from .base_parser import FileFormat, detect_file_format, guess_media_type
from .file_handlers import (
    DOCX_NOTICE,
    DOCXFileHandler,
    FileHandler,
    FileHandlerRegistry,
    PDFFileHandler,
    TextExtractionResult,
    TextExtractor,
)
from .text_document import RegexTextDocument, TextDocument
from .field_extractor import FieldExtractor
from .experience import ExperienceEstimator, estimate_years
from .profile_builder import ProfileBuilder, generate_summary

__all__ = [
    "FileFormat",
    "detect_file_format",
    "guess_media_type",
    "DOCX_NOTICE",
    "DOCXFileHandler",
    "FileHandler",
    "FileHandlerRegistry",
    "PDFFileHandler",
    "TextExtractionResult",
    "TextExtractor",
    "RegexTextDocument",
    "TextDocument",
    "FieldExtractor",
    "ExperienceEstimator",
    "estimate_years",
    "ProfileBuilder",
    "generate_summary",
]
