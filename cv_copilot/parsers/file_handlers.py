"""File handlers that turn uploaded CV bytes into raw text."""

import logging
import re
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any, Callable, Dict, List, Optional

import docx
from pypdf import PdfReader

from .base_parser import FileFormat, detect_file_format
from .placeholders import placeholder_for
from ..models.enums import ExtractionMode
from ..utils.exceptions import ExtractionFailureError, InsufficientTextError, UnsupportedFormatError
from ..utils.logging import get_logger

DOCX_NOTICE = (
    "This document format is not well supported. "
    "For best results, please upload your CV as a PDF file."
)

DEFAULT_MIN_TEXT_LENGTH = 20

# Printable runs kept by the raw DOCX decode, in the spirit of `strings`
_PRINTABLE_RUN = re.compile(r"[^\x00-\x1f\x7f-\x9f�]{4,}")

# Local file header of a zip archive; every .docx starts with it
ZIP_SIGNATURE = b"PK\x03\x04"


@dataclass
class TextExtractionResult:
    """Result of text extraction from an uploaded file."""
    text: str
    mode: ExtractionMode = ExtractionMode.NATIVE
    strategy: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    extraction_errors: List[str] = field(default_factory=list)


class FileHandler:
    """Base class for file handlers."""

    def __init__(self, file_format: FileFormat, logger: Optional[logging.Logger] = None):
        """Initialize file handler.

        Args:
            file_format: Format this handler supports
            logger: Logger to report progress and per-page failures to
        """
        self.file_format = file_format
        self.logger = logger or get_logger(f"file_handler.{file_format.value}")

    def extract_text(self, file_bytes: bytes, file_name: str = "") -> TextExtractionResult:
        """Extract text from file bytes.

        Args:
            file_bytes: Content of the uploaded file
            file_name: Name of the uploaded file

        Returns:
            TextExtractionResult containing extracted text and metadata
        """
        raise NotImplementedError


class PDFFileHandler(FileHandler):
    """Handler for PDF files.

    The document is decoded once. Text is first assembled from the
    positioned text runs of each page; if that yields only whitespace the
    plain text accessor of the same pages is tried. A page that fails is
    logged and skipped.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, placeholder_fallback: bool = True):
        """Initialize PDF file handler.

        Args:
            logger: Logger to report progress and per-page failures to
            placeholder_fallback: Return a placeholder CV when no text is found
        """
        super().__init__(FileFormat.PDF, logger)
        self.placeholder_fallback = placeholder_fallback

    def extract_text(self, file_bytes: bytes, file_name: str = "") -> TextExtractionResult:
        """Extract text from a PDF document.

        Raises:
            ExtractionFailureError: If the document cannot be decoded
        """
        reader = self._open(file_bytes, file_name)
        page_count = len(reader.pages)
        errors: List[str] = []

        text = self._extract_pages(reader, page_count, self._page_text_runs, "text runs", errors)
        strategy = "text-runs"
        if not text.strip():
            self.logger.debug(f"No text runs found in {file_name or 'PDF'}, retrying with plain text accessor")
            text = self._extract_pages(reader, page_count, self._page_plain_text, "plain text", errors)
            strategy = "plain-text"

        metadata = {"page_count": page_count, "file_size": len(file_bytes)}

        if not text.strip() and self.placeholder_fallback:
            self.logger.warning(
                f"No extractable text in {file_name or 'PDF'} ({page_count} pages); using placeholder CV"
            )
            return TextExtractionResult(
                text=placeholder_for(file_name),
                mode=ExtractionMode.PLACEHOLDER,
                strategy="placeholder",
                metadata=metadata,
                extraction_errors=errors,
            )

        return TextExtractionResult(
            text=text,
            mode=ExtractionMode.NATIVE,
            strategy=strategy,
            metadata=metadata,
            extraction_errors=errors,
        )

    def _open(self, file_bytes: bytes, file_name: str) -> PdfReader:
        """Decode the PDF structure."""
        try:
            reader = PdfReader(BytesIO(file_bytes))
            if reader.is_encrypted:
                reader.decrypt("")
            # Touch the page tree so a broken catalog fails here
            len(reader.pages)
            return reader
        except Exception as e:
            self.logger.error(f"Failed to decode PDF {file_name}: {e}")
            raise ExtractionFailureError(f"Could not decode PDF: {e}", file_name=file_name) from e

    def _extract_pages(
        self,
        reader: PdfReader,
        page_count: int,
        page_extractor: Callable[[Any], str],
        label: str,
        errors: List[str],
    ) -> str:
        """Run one extraction strategy over every page, skipping failing pages."""
        page_texts = []
        for index in range(page_count):
            try:
                page_text = page_extractor(reader.pages[index])
            except Exception as e:
                message = f"page {index + 1}: {label} extraction failed: {e}"
                self.logger.warning(message)
                errors.append(message)
                continue
            if page_text:
                page_texts.append(page_text)
        return "\n".join(page_texts)

    def _page_text_runs(self, page: Any) -> str:
        """Join the positioned text runs of a page with single spaces."""
        runs: List[str] = []

        def visitor(text, cm, tm, font_dict, font_size):
            if text and text.strip():
                runs.append(text.strip())

        page.extract_text(visitor_text=visitor)
        return " ".join(runs)

    def _page_plain_text(self, page: Any) -> str:
        """Get the text of a page through pypdf's plain accessor."""
        return (page.extract_text() or "").strip()


class DOCXFileHandler(FileHandler):
    """Handler for word-processing documents.

    Paragraphs and table cells are read with python-docx. Legacy .doc files,
    which python-docx cannot open, fall back to a raw decode of the byte
    stream. A document without text, or a zip archive python-docx rejects,
    gets a fixed notice recommending PDF instead of an error.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize DOCX file handler."""
        super().__init__(FileFormat.DOCX, logger)

    def extract_text(self, file_bytes: bytes, file_name: str = "") -> TextExtractionResult:
        """Extract text from a word-processing document."""
        metadata = {"file_size": len(file_bytes)}
        errors: List[str] = []

        try:
            text = self._extract_docx_text(file_bytes)
            strategy = "python-docx"
            metadata["paragraph_count"] = len(text.split("\n")) if text else 0
        except Exception as e:
            self.logger.warning(f"python-docx could not read {file_name or 'document'}: {e}")
            errors.append(str(e))
            # A zip container decodes to archive noise, not document text
            text = "" if file_bytes.startswith(ZIP_SIGNATURE) else self._raw_decode(file_bytes)
            strategy = "raw-decode"

        if text.strip():
            return TextExtractionResult(
                text=text, strategy=strategy, metadata=metadata, extraction_errors=errors
            )

        self.logger.warning(f"No text decoded from {file_name or 'document'}; returning format notice")
        return TextExtractionResult(
            text=DOCX_NOTICE,
            mode=ExtractionMode.NOTICE,
            strategy="notice",
            metadata=metadata,
            extraction_errors=errors,
        )

    def _extract_docx_text(self, file_bytes: bytes) -> str:
        """Extract paragraphs and table rows with python-docx."""
        document = docx.Document(BytesIO(file_bytes))

        text_parts = []
        for paragraph in document.paragraphs:
            if paragraph.text.strip():
                text_parts.append(paragraph.text.strip())

        for table in document.tables:
            for row in table.rows:
                row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if row_text:
                    text_parts.append(" | ".join(row_text))

        return "\n".join(text_parts)

    def _raw_decode(self, file_bytes: bytes) -> str:
        """Best-effort decode of the byte stream as text."""
        decoded = file_bytes.decode("utf-8", errors="ignore")
        runs = [run.strip() for run in _PRINTABLE_RUN.findall(decoded)]
        return "\n".join(run for run in runs if any(ch.isalpha() for ch in run))


class FileHandlerRegistry:
    """Registry for file handlers."""

    def __init__(self, logger: Optional[logging.Logger] = None, placeholder_fallback: bool = True):
        """Initialize the file handler registry.

        Args:
            logger: Logger handed to every handler
            placeholder_fallback: Forwarded to the PDF handler
        """
        self.handlers: Dict[FileFormat, FileHandler] = {
            FileFormat.PDF: PDFFileHandler(logger, placeholder_fallback=placeholder_fallback),
            FileFormat.DOCX: DOCXFileHandler(logger),
        }

    def get_handler(self, file_format: FileFormat) -> Optional[FileHandler]:
        """Get handler for a specific file format."""
        return self.handlers.get(file_format)


class TextExtractor:
    """Produces raw CV text from uploaded bytes and a declared media type."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
        placeholder_fallback: bool = True,
    ):
        """Initialize the extractor.

        Args:
            logger: Logger for progress and partial failures
            min_text_length: Minimum number of characters a result must have
            placeholder_fallback: Allow placeholder CVs for text-less PDFs
        """
        self.logger = logger or get_logger("text_extractor")
        self.min_text_length = min_text_length
        self.registry = FileHandlerRegistry(self.logger, placeholder_fallback=placeholder_fallback)

    def check_media_type(self, media_type: Optional[str]) -> FileFormat:
        """Resolve the declared media type or reject it.

        Raises:
            UnsupportedFormatError: If the media type is not PDF or a word-processing document
        """
        file_format = detect_file_format(media_type)
        if file_format is None or self.registry.get_handler(file_format) is None:
            self.logger.info(f"Rejected unsupported media type: {media_type!r}")
            raise UnsupportedFormatError(f"Unsupported media type: {media_type}", media_type=media_type)
        return file_format

    def extract(self, file_bytes: bytes, media_type: Optional[str], file_name: str = "") -> TextExtractionResult:
        """Extract raw text from an uploaded file.

        Args:
            file_bytes: Content of the uploaded file
            media_type: Declared media type
            file_name: Name of the uploaded file, used for the placeholder fallback

        Returns:
            TextExtractionResult with the extracted text

        Raises:
            UnsupportedFormatError: Media type is not PDF or a word-processing document
            ExtractionFailureError: The document could not be decoded
            InsufficientTextError: Fewer than ``min_text_length`` characters were extracted
        """
        file_format = self.check_media_type(media_type)
        handler = self.registry.get_handler(file_format)

        self.logger.debug(f"Extracting {file_format.value} text from {file_name or 'upload'} ({len(file_bytes)} bytes)")
        result = handler.extract_text(file_bytes, file_name)

        text_length = len(result.text.strip())
        if text_length < self.min_text_length:
            self.logger.info(f"Extracted only {text_length} characters from {file_name or 'upload'}")
            raise InsufficientTextError(
                f"Extracted text is too short ({text_length} characters)",
                text_length=text_length,
                details={"strategy": result.strategy, "errors": result.extraction_errors},
            )

        self.logger.debug(
            f"Extracted {text_length} characters using {result.strategy}",
            extra={"strategy": result.strategy, "mode": result.mode.value},
        )
        return result
