"""Tests for pipeline configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from unicode_tokenizer.config import Config, OutputConfig, ProcessingConfig, TokenizerConfig


def test_config_defaults():
    """Test configuration defaults."""
    config = Config()

    assert config.input_file is None
    assert config.input_format == "jsonl"
    assert config.tokenizer.name == "unicode"
    assert config.tokenizer.bytes_per_token == 6
    assert config.tokenizer.adaptive == True
    assert config.processing.workers == 1
    assert config.processing.text_fields == ["text", "content"]
    assert config.output.format == "csv"
    assert config.output.save_full_files == True
    assert config.output.save_single_lines == False


def test_input_file_converted_to_path():
    config = Config(input_file="data/input.jsonl")
    assert config.input_file == Path("data/input.jsonl")


@pytest.mark.parametrize(
    "factory",
    [
        lambda: TokenizerConfig(bytes_per_token=0),
        lambda: ProcessingConfig(workers=0),
        lambda: OutputConfig(format="parquet"),
        lambda: Config(input_format="xml"),
    ],
)
def test_invalid_values(factory):
    with pytest.raises(ValidationError):
        factory()


def test_yaml_round_trip(tmp_path):
    """Test saving and loading config from YAML."""
    config = Config(
        input_file=tmp_path / "docs.jsonl",
        input_format="text",
        tokenizer=TokenizerConfig(bytes_per_token=8, adaptive=False),
        output=OutputConfig(output_dir=tmp_path / "out", format="jsonl"),
    )
    path = tmp_path / "config.yaml"
    config.to_yaml(path)

    loaded = Config.from_yaml(path)
    assert loaded == config


def test_yaml_partial(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("tokenizer:\n  bytes_per_token: 3\n")

    config = Config.from_yaml(path)
    assert config.tokenizer.bytes_per_token == 3
    assert config.output.format == "csv"


def test_example_config_loads():
    config_path = Path(__file__).parent.parent / "config.yaml"

    if config_path.exists():
        config = Config.from_yaml(config_path)
        assert isinstance(config, Config)
        assert config.tokenizer.name == "unicode"
