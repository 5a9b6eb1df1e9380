"""Block builder: fills scheduled pillar slots with workout blocks."""

from program_engine.block_builder.builder import BlockBuilder

__all__ = ["BlockBuilder"]
