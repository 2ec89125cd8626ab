import re

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9\-_./]")

SUPPORTED_EXTENSIONS = frozenset({"pdf", "png", "jpg", "jpeg", "tiff"})

_CATEGORIES: dict[str, str] = {
    "pdf": "pdf-document",
    "jpg": "image-document",
    "jpeg": "image-document",
    "png": "image-document",
    "tiff": "image-document",
    "doc": "word-document",
    "docx": "word-document",
}


def sanitize_document_id(raw: str) -> str:
    """Replace every character outside ``[A-Za-z0-9-_./]`` with ``_``."""
    return _UNSAFE_ID_CHARS.sub("_", raw)


def build_document_id(container: str, object_path: str) -> str:
    return sanitize_document_id(f"{container}/{object_path}")


def file_extension(object_path: str) -> str:
    """Lowercased text after the last dot (the whole path if there is none)."""
    return object_path.rsplit(".", 1)[-1].lower()


def categorize_document(extension: str) -> str:
    return _CATEGORIES.get(extension.lower(), "unknown")


def is_supported_for_extraction(extension: str) -> bool:
    return extension.lower() in SUPPORTED_EXTENSIONS
