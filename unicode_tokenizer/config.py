"""Configuration management for the tokenization pipeline."""

from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class TokenizerConfig(BaseModel):
    """Configuration for the tokenizer."""

    name: str = "unicode"
    bytes_per_token: int = Field(default=6, ge=1)
    adaptive: bool = True


class ProcessingConfig(BaseModel):
    """Configuration for processing options."""

    workers: int = Field(default=1, ge=1)
    text_fields: List[str] = Field(default_factory=lambda: ["text", "content"])
    id_field: str = "id"


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/tokenized_output")
    format: Literal["csv", "jsonl"] = "csv"
    save_full_files: bool = True     # One file with the tokens of every document
    save_single_lines: bool = False  # One file per document


class Config(BaseModel):
    """Main configuration for the tokenization pipeline."""

    input_file: Optional[Path] = None
    input_format: Literal["jsonl", "text"] = "jsonl"
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
