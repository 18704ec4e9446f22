"""
Pipeline tasks.

Exports: normalization, boundary splitting, chunking, transcript parsing,
time-based chunking and batched submission
"""

from .boundary_splitter import split_sentences, split_words
from .chunking_task import ChunkingTask
from .normalization import normalize_text
from .time_chunking_task import TimeChunkingTask
from .vector_store_task import VectorStoreTask
from .vtt_parsing_task import VttParsingTask, format_timestamp, parse_timestamp

__all__ = [
    "ChunkingTask",
    "TimeChunkingTask",
    "VectorStoreTask",
    "VttParsingTask",
    "format_timestamp",
    "normalize_text",
    "parse_timestamp",
    "split_sentences",
    "split_words",
]
