"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application settings."""

    openai_api_key: Optional[str] = Field(
        default=None, description="Secret key for OpenAI APIs."
    )
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model_chat: str = "gpt-4.1-mini"

    qdrant_url: str = "http://localhost:6333"
    qdrant_api_key: Optional[str] = None
    qdrant_collection: str = "shoptalk_contracts"

    embedding_model: str = "BAAI/bge-m3"
    embedding_device: str = "cpu"
    embedding_batch_size: int = 8

    contracts_root: str = "."
    extracted_dir: str = "data/extracted"
    chunks_path: str = "data/chunks/contract_chunks.jsonl"

    chunk_target_tokens: int = 400
    chunk_max_tokens: int = 500
    chunk_overlap_tokens: int = 50
    chunk_preserve_article_boundaries: bool = True

    retrieval_top_k: int = 5
    max_evidence_blocks: int = 6
    max_evidence_tokens: int = 3000

    log_level: str = "INFO"
    legal_disclaimer: str = (
        "This information is for educational purposes only and does not constitute legal advice. "
        "For specific situations, consult your union steward or business agent"
    )
    allow_tiktoken_fallback: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def contracts_root_path(self) -> Path:
        return Path(self.contracts_root)

    @property
    def extracted_dir_path(self) -> Path:
        return Path(self.extracted_dir)

    @property
    def chunks_path_obj(self) -> Path:
        return Path(self.chunks_path)


settings = Settings()
