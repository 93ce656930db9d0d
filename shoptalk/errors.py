"""Exception types raised by the contract core."""

from __future__ import annotations


class ShopTalkError(Exception):
    """Base class for application errors."""


class MalformedDocumentError(ShopTalkError, ValueError):
    """Extracted document violates its page invariants."""


class DocumentNotFoundError(ShopTalkError, LookupError):
    """A document ID is not part of the contract catalogue or manifest."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f"Unknown contract document: {document_id}")
        self.document_id = document_id


class DocumentAccessError(ShopTalkError, PermissionError):
    """A document lies outside the caller's contract scope."""

    def __init__(self, document_id: str, scope: list[str]) -> None:
        super().__init__(
            f"Document {document_id} is not in scope {', '.join(scope)}"
        )
        self.document_id = document_id
        self.scope = scope
