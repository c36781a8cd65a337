from gust.content.extractor import extract_candidates, extract_values
from gust.content.glob import CompiledGlob, compile_glob, validate_glob
from gust.content.scanner import ContentScanner, ScanResult

__all__ = [
    "CompiledGlob",
    "ContentScanner",
    "ScanResult",
    "compile_glob",
    "extract_candidates",
    "extract_values",
    "validate_glob",
]
