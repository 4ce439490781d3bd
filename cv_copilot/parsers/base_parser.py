"""File format detection shared by the extraction pipeline."""

from enum import Enum
from pathlib import PurePath
from typing import Dict, Optional


class FileFormat(Enum):
    """Document formats accepted for analysis."""
    PDF = "pdf"
    DOCX = "docx"


PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MSWORD_MEDIA_TYPE = "application/msword"

MEDIA_TYPE_FORMATS: Dict[str, FileFormat] = {
    PDF_MEDIA_TYPE: FileFormat.PDF,
    DOCX_MEDIA_TYPE: FileFormat.DOCX,
    MSWORD_MEDIA_TYPE: FileFormat.DOCX,
}

EXTENSION_MEDIA_TYPES: Dict[str, str] = {
    "pdf": PDF_MEDIA_TYPE,
    "docx": DOCX_MEDIA_TYPE,
    "doc": MSWORD_MEDIA_TYPE,
}


def detect_file_format(media_type: Optional[str]) -> Optional[FileFormat]:
    """Map a declared media type to a supported format.

    Parameters such as ``; charset=binary`` are ignored.

    Args:
        media_type: Declared media type of the upload

    Returns:
        The matching FileFormat, or None when the type is not supported
    """
    if not media_type:
        return None
    essence = media_type.split(";", 1)[0].strip().lower()
    return MEDIA_TYPE_FORMATS.get(essence)


def guess_media_type(file_name: str) -> str:
    """Guess a media type from a file name's extension.

    Args:
        file_name: Name or path of the file

    Returns:
        Media type string, ``application/octet-stream`` for unknown extensions
    """
    extension = PurePath(file_name).suffix.lower().lstrip(".")
    return EXTENSION_MEDIA_TYPES.get(extension, "application/octet-stream")
