"""Document reading exports."""

from .document_reader import DocumentReadError, read_data_document

__all__ = ["DocumentReadError", "read_data_document"]
