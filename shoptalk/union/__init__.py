"""Union reference data and contract scope resolution."""

from .locals import LOCALS, get_local_by_number
from .mapping import applicable_documents, document_scope, has_explicit_mapping, resolve_chain
from .supplements import MASTER_AGREEMENT, RIDERS, SUPPLEMENTS, get_document

__all__ = [
    "LOCALS",
    "MASTER_AGREEMENT",
    "RIDERS",
    "SUPPLEMENTS",
    "applicable_documents",
    "document_scope",
    "get_document",
    "get_local_by_number",
    "has_explicit_mapping",
    "resolve_chain",
]
