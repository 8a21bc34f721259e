"""Generate sample XARF reports and hash evidence."""

from .evidence import build_evidence, decode_base64, hash_bytes
from .generator import GeneratorOptions, generate_report, randomize_options

__all__ = [
    "GeneratorOptions",
    "generate_report",
    "randomize_options",
    "build_evidence",
    "decode_base64",
    "hash_bytes",
]
