"""Extraction run exports."""

from .extraction_run_use_case import run_extraction
from .run_contracts import ExtractionRequest, ExtractionSummary

__all__ = ["ExtractionRequest", "ExtractionSummary", "run_extraction"]
