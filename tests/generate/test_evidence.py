"""Tests for evidence hashing."""

import pytest

from generate import build_evidence, decode_base64, hash_bytes

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


class TestHashBytes:
    """Tests for hash_bytes."""

    def test_empty_input(self):
        """Test the sha256 digest of empty input."""
        assert hash_bytes(b"") == {"sha256": EMPTY_SHA256}

    def test_additional_algorithms(self):
        """Test that sha1 and md5 are added in the order requested."""
        hashes = hash_bytes(b"abc", ("md5", "sha1"))

        assert list(hashes) == ["sha256", "md5", "sha1"]
        assert hashes["md5"] == "900150983cd24fb0d6963f7d28e17f72"
        assert hashes["sha1"] == "a9993e364706816aba3e25717850c26c9cd0d89d"
        assert hashes["sha256"] == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_unsupported_algorithm(self):
        """Test that unknown algorithms raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            hash_bytes(b"abc", ("sha512",))


class TestDecodeBase64:
    """Tests for decode_base64."""

    def test_ignores_whitespace(self):
        """Test that line breaks inside base64 are ignored."""
        assert decode_base64("aGVs\nbG8=\n") == b"hello"

    def test_invalid_data(self):
        """Test that non-base64 input raises ValueError."""
        with pytest.raises(ValueError, match="Invalid base64 data"):
            decode_base64("not base64!")


def test_build_file_evidence():
    """Test evidence built from file content."""
    evidence = build_evidence(
        b"", "file", filename="capture.pcap", content_type="application/vnd.tcpdump.pcap"
    )

    assert evidence.as_dict() == {
        "type": "file",
        "description": "Uploaded file: capture.pcap",
        "hash": EMPTY_SHA256,
        "hash_algorithm": "sha256",
        "filename": "capture.pcap",
        "size": 0,
        "content_type": "application/vnd.tcpdump.pcap",
    }


def test_build_text_evidence_drops_file_fields():
    """Test that text evidence carries no filename or content type."""
    evidence = build_evidence(b"hello", "text", filename="ignored.txt")

    assert evidence.type == "data"
    assert evidence.description == "Text evidence"
    assert evidence.filename is None
    assert evidence.size == 5
