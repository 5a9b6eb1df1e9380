"""Serialization module: export generated programs as persisted-row dicts."""

from program_engine.serialization.records import (
    block_document,
    to_program_json_string,
    to_program_records,
)

__all__ = ["block_document", "to_program_json_string", "to_program_records"]
