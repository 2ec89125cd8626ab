class OcrError(Exception):
    """Raised when the OCR service cannot analyze a document."""
