"""Program generation and time-budget allocation engine."""

from program_engine.engine import ProgramEngine, build_personalized_program

__all__ = ["ProgramEngine", "build_personalized_program"]
