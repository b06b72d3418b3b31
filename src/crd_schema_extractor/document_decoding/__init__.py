"""Document decoding exports."""

from .crd_models import CRDDocument, DocumentDecodeResult, VersionRecord
from .document_decoder import CRDLoader, build_crd_document, decode_documents, split_documents

__all__ = [
    "CRDDocument",
    "CRDLoader",
    "DocumentDecodeResult",
    "VersionRecord",
    "build_crd_document",
    "decode_documents",
    "split_documents",
]
