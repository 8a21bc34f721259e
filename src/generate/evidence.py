"""Evidence hashing for XARF reports.

Callers read files or decode input themselves and pass the bytes in; nothing
here touches the filesystem.
"""

import base64
import binascii
import hashlib
import re
from typing import Literal

from convert.models import Evidence

SUPPORTED_ALGORITHMS: tuple[str, ...] = ("sha256", "sha1", "md5")

InputMethod = Literal["file", "text", "base64"]

_WHITESPACE = re.compile(r"\s+")


def hash_bytes(data: bytes, algorithms: tuple[str, ...] = ()) -> dict[str, str]:
    """Compute hex digests of evidence bytes.

    sha256 is always computed; other algorithms are added in the order given.

    Args:
        data: Evidence content
        algorithms: Additional algorithm names (sha1, md5)

    Returns:
        Mapping of algorithm name to hex digest

    Raises:
        ValueError: If an algorithm is not supported
    """
    hashes = {"sha256": hashlib.sha256(data).hexdigest()}
    for name in algorithms:
        name = name.lower()
        if name not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unsupported hash algorithm: {name}. "
                f"Must be one of: {', '.join(SUPPORTED_ALGORITHMS)}"
            )
        if name not in hashes:
            hashes[name] = hashlib.new(name, data).hexdigest()
    return hashes


def decode_base64(text: str) -> bytes:
    """Decode base64 evidence, ignoring embedded whitespace and newlines.

    Raises:
        ValueError: If the text is not valid base64
    """
    try:
        return base64.b64decode(_WHITESPACE.sub("", text), validate=True)
    except binascii.Error as e:
        raise ValueError("Invalid base64 data") from e


def describe(method: InputMethod, filename: str | None = None) -> str:
    if method == "file":
        return f"Uploaded file: {filename}" if filename else "Uploaded file evidence"
    if method == "text":
        return "Text evidence"
    if method == "base64":
        return "Base64-encoded evidence"
    return "Evidence data"


def build_evidence(
    data: bytes,
    method: InputMethod,
    filename: str | None = None,
    content_type: str | None = None,
) -> Evidence:
    """Build a XARF evidence entry for already-materialized bytes.

    Args:
        data: Evidence content
        method: How the evidence was supplied
        filename: Original file name, for file evidence
        content_type: MIME type, for file evidence

    Returns:
        Evidence with a sha256 hash and the content size
    """
    is_file = method == "file"
    return Evidence(
        type="file" if is_file else "data",
        description=describe(method, filename),
        hash=hash_bytes(data)["sha256"],
        hash_algorithm="sha256",
        filename=filename if is_file else None,
        size=len(data),
        content_type=content_type if is_file else None,
    )
