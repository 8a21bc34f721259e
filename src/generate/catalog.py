"""Category catalogue used by the sample report generator."""

from types import MappingProxyType

# Event types available for each report category
EVENT_TYPES = MappingProxyType(
    {
        "abuse": ("ddos", "malware", "phishing", "spam", "scanner"),
        "vulnerability": ("cve", "misconfiguration", "open_service"),
        "connection": (
            "compromised",
            "botnet",
            "malicious_traffic",
            "ddos",
            "port_scan",
            "login_attack",
        ),
        "content": ("illegal", "malicious", "policy_violation", "phishing", "malware", "fraud"),
        "copyright": ("infringement", "dmca", "trademark", "p2p", "cyberlocker"),
        "messaging": ("bulk_messaging", "spam"),
        "reputation": ("blocklist", "threat_intelligence"),
        "infrastructure": ("botnet", "compromised_server"),
    }
)

TYPE_DESCRIPTIONS = MappingProxyType(
    {
        "abuse": {
            "ddos": "DDoS attack detected from this IP address",
            "malware": "Malware distribution or command and control activity detected",
            "phishing": "Phishing site or credential theft attempt identified",
            "spam": "Unsolicited bulk email originating from this source",
            "scanner": "Port scanning or network reconnaissance activity detected",
        },
        "vulnerability": {
            "cve": "Known CVE vulnerability detected on this system",
            "misconfiguration": "Security misconfiguration identified",
            "open_service": "Unintended publicly accessible service detected",
        },
        "connection": {
            "compromised": "Indicators of compromised system detected",
            "botnet": "Botnet membership or C&C communication identified",
            "malicious_traffic": "Suspicious or malicious network traffic observed",
            "ddos": "Participation in distributed denial of service attack",
            "port_scan": "Systematic port scanning activity detected",
            "login_attack": "Brute force or credential stuffing attack detected",
        },
        "content": {
            "illegal": "Illegal content hosted or distributed",
            "malicious": "Malicious content distribution detected",
            "policy_violation": "Content violates acceptable use policy",
            "phishing": "Phishing content or credential theft page",
            "malware": "Malware hosting or distribution",
            "fraud": "Fraudulent content or scam activity",
        },
        "copyright": {
            "infringement": "Copyright infringement detected",
            "dmca": "DMCA takedown notice issued",
            "trademark": "Trademark infringement identified",
            "p2p": "Peer-to-peer copyright infringement",
            "cyberlocker": "Unauthorized file sharing or hosting",
        },
        "messaging": {
            "bulk_messaging": "Unsolicited bulk messaging activity",
            "spam": "Spam messaging or robocall activity",
        },
        "reputation": {
            "blocklist": "Added to security blocklist",
            "threat_intelligence": "Identified as threat source by intelligence feeds",
        },
        "infrastructure": {
            "botnet": "Botnet infrastructure component identified",
            "compromised_server": "Compromised server or infrastructure detected",
        },
    }
)

# Evidence types suited to each category
EVIDENCE_TYPES = MappingProxyType(
    {
        "abuse": ("pcap", "log", "screenshot"),
        "vulnerability": ("scan_result", "log", "screenshot"),
        "connection": ("pcap", "log", "netflow"),
        "content": ("screenshot", "url", "sample"),
        "copyright": ("url", "screenshot", "document"),
        "messaging": ("message", "log", "sample"),
        "reputation": ("threat_feed", "log", "report"),
        "infrastructure": ("pcap", "log", "dns_record"),
    }
)

# Tags added after the category and type tags
EXTRA_TAGS = MappingProxyType(
    {
        "abuse": ("security", "incident"),
        "vulnerability": ("security", "disclosure"),
        "connection": ("network", "suspicious"),
        "content": ("abuse", "violation"),
        "copyright": ("legal", "dmca"),
        "messaging": ("spam", "abuse"),
        "reputation": ("threat-intel", "blocklist"),
        "infrastructure": ("network", "infrastructure"),
    }
)

SAMPLE_EVIDENCE_DATA: tuple[str, ...] = (
    "VGhpcyBpcyBhIHNhbXBsZSBldmlkZW5jZSBwYXlsb2Fk",
    "U2FtcGxlIG5ldHdvcmsgdHJhZmZpYyBjYXB0dXJl",
    "TG9nIGZpbGUgZXh0cmFjdCB3aXRoIHN1c3BpY2lvdXMgYWN0aXZpdHk=",
    "QmluYXJ5IGRhdGEgZnJvbSBtYWx3YXJlIHNhbXBsZQ==",
)

SAMPLE_ORGS: tuple[str, ...] = (
    "Security Operations",
    "Abuse Team",
    "Network Security",
    "Threat Intelligence",
    "SOC Team",
)

SAMPLE_DOMAINS: tuple[str, ...] = ("example.com", "security.net", "abuse.org", "soc.io")

TARGET_PORTS: tuple[int, ...] = (53, 80, 443, 8080)
