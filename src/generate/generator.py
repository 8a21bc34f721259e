"""Sample XARF report generator."""

import random
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from common.constants import SEVERITY_LEVELS
from common.env import env
from common.logger import get_logger

from .catalog import (
    EVENT_TYPES,
    EVIDENCE_TYPES,
    EXTRA_TAGS,
    SAMPLE_DOMAINS,
    SAMPLE_EVIDENCE_DATA,
    SAMPLE_ORGS,
    TARGET_PORTS,
    TYPE_DESCRIPTIONS,
)

logger = get_logger(__name__)


@dataclass
class GeneratorOptions:
    """Inputs for a generated report."""

    category: str
    type: str
    source_identifier: str
    reporter_contact: str
    reporter_org: str | None = None
    on_behalf_of: dict[str, str] | None = None  # {"org": ..., "contact": ...}
    include_evidence: bool = False
    include_optional: bool = False


def format_type_name(event_type: str) -> str:
    """Turn a type token into a display name.

    Example:
        >>> format_type_name("port_scan")
        'Port Scan'
    """
    return " ".join(word[:1].upper() + word[1:] for word in event_type.split("_"))


def _iso(moment: datetime) -> str:
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_uuid(rng: random.Random) -> str:
    """Generate a random UUID v4 string from the given random source."""
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def generate_hash(rng: random.Random) -> str:
    """Generate a random 64-character hex string shaped like a sha256 digest."""
    return f"{rng.getrandbits(256):064x}"


def generate_evidence(category: str, event_type: str, rng: random.Random) -> list[dict[str, Any]]:
    """Build a single sample evidence entry for a category."""
    evidence_type = rng.choice(EVIDENCE_TYPES.get(category, ("log",)))
    return [
        {
            "type": evidence_type,
            "description": f"Evidence showing {format_type_name(event_type)} activity",
            "data": rng.choice(SAMPLE_EVIDENCE_DATA),
            "hash": generate_hash(rng),
            "hash_algorithm": "sha256",
        }
    ]


def generate_tags(category: str, event_type: str) -> list[str]:
    return [category, event_type, *EXTRA_TAGS.get(category, ())]


def generate_report(
    options: GeneratorOptions, rng: random.Random | None = None
) -> dict[str, Any]:
    """Generate a complete XARF report.

    Args:
        options: Report contents to use
        rng: Random source; pass a seeded instance for reproducible output

    Returns:
        XARF report as a dictionary

    Raises:
        ValueError: If the source identifier or reporter contact is missing
    """
    if not options.source_identifier:
        raise ValueError("Source identifier is required")
    if not options.reporter_contact:
        raise ValueError("Reporter contact is required")

    rng = rng or random.Random()
    now = datetime.now(timezone.utc)

    reporter: dict[str, Any] = {"contact": options.reporter_contact, "type": "automated"}
    if options.reporter_org:
        reporter["org"] = options.reporter_org
    if options.on_behalf_of and options.on_behalf_of.get("org"):
        reporter["on_behalf_of"] = dict(options.on_behalf_of)

    report: dict[str, Any] = {
        "xarf_version": env.schema_version(),
        "report_id": generate_uuid(rng),
        "timestamp": _iso(now),
        "reporter": reporter,
        "source_identifier": options.source_identifier,
        "category": options.category,
        "type": options.type,
    }

    description = TYPE_DESCRIPTIONS.get(options.category, {}).get(options.type)
    if description:
        report["description"] = description

    if options.include_evidence:
        report["evidence"] = generate_evidence(options.category, options.type, rng)

    if options.include_optional:
        report["severity"] = rng.choice(SEVERITY_LEVELS)
        report["confidence"] = round(0.7 + rng.random() * 0.29, 2)
        report["tags"] = generate_tags(options.category, options.type)
        if options.category == "abuse" and options.type == "ddos":
            report["attack_vector"] = "udp_flood"
        report["target"] = {
            "ip": f"203.0.113.{rng.randrange(256)}",
            "port": rng.choice(TARGET_PORTS),
        }
        report["occurrence"] = {
            "start": _iso(now - timedelta(hours=1)),
            "end": _iso(now),
        }

    logger.debug(f"Generated {options.category}/{options.type} report {report['report_id']}")
    return report


def randomize_options(rng: random.Random | None = None) -> GeneratorOptions:
    """Draw a random but plausible set of generator options.

    Source addresses come from the 192.0.2.0/24 documentation range.
    """
    rng = rng or random.Random()
    category = rng.choice(list(EVENT_TYPES))
    return GeneratorOptions(
        category=category,
        type=rng.choice(EVENT_TYPES[category]),
        source_identifier=f"192.0.2.{rng.randrange(256)}",
        reporter_org=rng.choice(SAMPLE_ORGS),
        reporter_contact=f"abuse@{rng.choice(SAMPLE_DOMAINS)}",
        include_evidence=rng.random() > 0.3,
        include_optional=rng.random() > 0.5,
    )
