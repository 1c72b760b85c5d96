"""Tokenization pipeline for text and JSONL files."""

import json
import logging
import os
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .models import Tokenizer
from .registry import TokenizerRegistry, register_builtin_tokenizers

logger = logging.getLogger(__name__)

COLUMNS = [
    "Document_ID",
    "Source_Line_Number",
    "Term",
    "Start",
    "End",
    "Position",
    "Type",
]


def sanitize_filename(name: str) -> str:
    """Sanitize filename for safe filesystem usage.

    Args:
        name: Original filename

    Returns:
        Sanitized filename
    """
    name = os.path.splitext(name)[0]
    return re.sub(r'[<>:"/\\|?*]', "_", name).strip()


def token_rows(
    tokenizer: Tokenizer, data: bytes, doc_id: str, line_num: int
) -> list[dict]:
    """Tokenize one document into output rows."""
    return [
        {
            "Document_ID": doc_id,
            "Source_Line_Number": line_num,
            "Term": token.text,
            "Start": token.start,
            "End": token.end,
            "Position": token.position,
            "Type": token.type.value,
        }
        for token in tokenizer.tokenize(data)
    ]


def _tokenize_record_worker(args: tuple) -> tuple[int, list[dict]]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, doc_id, data, tokenizer)

    Returns:
        (line_num, list of row dicts)
    """
    line_num, doc_id, data, tokenizer = args
    return line_num, token_rows(tokenizer, data, doc_id, line_num)


class TokenizationPipeline:
    """Pipeline for tokenizing text files into token tables."""

    def __init__(self, config: Config, registry: Optional[TokenizerRegistry] = None):
        """Initialize tokenization pipeline.

        Args:
            config: Pipeline configuration
            registry: Tokenizer registry; the built-in tokenizers are used if omitted
        """
        self.config = config
        if registry is None:
            registry = register_builtin_tokenizers(TokenizerRegistry())
        self.registry = registry
        self.tokenizer = registry.create(
            config.tokenizer.name, config.tokenizer.model_dump()
        )

    def iter_documents(self, input_path: Path) -> Iterator[tuple[int, str, bytes]]:
        """Yield (line_num, doc_id, data) for each document in the input.

        A text file is a single document whose offsets index the file itself.
        A JSONL file holds one document per line.
        """
        if self.config.input_format == "text":
            yield 1, input_path.stem, input_path.read_bytes()
            return

        fields = self.config.processing.text_fields
        id_field = self.config.processing.id_field
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning("Skipping malformed JSON at line %d: %s", line_num, e)
                    continue
                if not isinstance(record, dict):
                    logger.warning("Skipping non-object JSON at line %d", line_num)
                    continue
                text_content = next(
                    (record[f] for f in fields if isinstance(record.get(f), str) and record[f]),
                    "",
                )
                if not text_content:
                    continue
                doc_id = str(record.get(id_field) or f"line_{line_num}")
                yield line_num, doc_id, text_content.encode("utf-8")

    def _setup_output_dirs(self) -> tuple[Path, Path]:
        """Create output directories based on configuration.

        Returns:
            Tuple of (full_files_dir, single_lines_dir)
        """
        full_dir = self.config.output.output_dir / "Full_Files"
        single_dir = self.config.output.output_dir / "Single_Lines"

        if self.config.output.save_full_files:
            full_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_single_lines:
            single_dir.mkdir(parents=True, exist_ok=True)

        return full_dir, single_dir

    def _write_table(self, rows: list[dict], directory: Path, stem: str) -> Path:
        """Write rows as CSV or JSON lines, depending on the output format."""
        df = pd.DataFrame(rows, columns=COLUMNS)
        path = directory / f"{stem}.{self.config.output.format}"
        if self.config.output.format == "jsonl":
            df.to_json(path, orient="records", lines=True, force_ascii=False)
        else:
            df.to_csv(path, index=False)
        return path

    def _process_sequential(self, input_path: Path) -> dict[int, list[dict]]:
        results = {}
        for line_num, doc_id, data in tqdm(
            self.iter_documents(input_path), desc="Tokenizing"
        ):
            results[line_num] = token_rows(self.tokenizer, data, doc_id, line_num)
        return results

    def _process_parallel(self, input_path: Path) -> dict[int, list[dict]]:
        workers = self.config.processing.workers
        tasks = [
            (line_num, doc_id, data, self.tokenizer)
            for line_num, doc_id, data in self.iter_documents(input_path)
        ]

        results = {}
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_tokenize_record_worker, task) for task in tasks]
            for future in tqdm(
                as_completed(futures),
                total=len(futures),
                desc=f"Tokenizing ({workers} workers)",
            ):
                line_num, rows = future.result()
                results[line_num] = rows
        return results

    def process_file(self, input_path: Path) -> int:
        """Tokenize every document in a file and write the token tables.

        Args:
            input_path: Path to the input file

        Returns:
            Number of documents processed
        """
        full_dir, single_dir = self._setup_output_dirs()
        logger.info("Reading from: %s", input_path)

        if self.config.processing.workers <= 1:
            results = self._process_sequential(input_path)
        else:
            results = self._process_parallel(input_path)

        ordered = [results[line_num] for line_num in sorted(results)]

        if self.config.output.save_single_lines:
            for rows in ordered:
                if not rows:
                    continue
                first = rows[0]
                name = sanitize_filename(str(first["Document_ID"]))[:30]
                self._write_table(
                    rows, single_dir, f"Line_{first['Source_Line_Number']}_{name}"
                )
            logger.info("Individual document files saved in: %s", single_dir)

        if self.config.output.save_full_files:
            all_rows = [row for rows in ordered for row in rows]
            saved = self._write_table(
                all_rows, full_dir, f"{sanitize_filename(input_path.name)}_tokens"
            )
            logger.info("Saved %d tokens to %s", len(all_rows), saved)

        return len(results)

    def run(self) -> int:
        """Run the tokenization pipeline.

        Returns:
            Number of documents processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
