from .documents import dumps_document, loads_document, read_document, write_document

__all__ = ["dumps_document", "loads_document", "read_document", "write_document"]
