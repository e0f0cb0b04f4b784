"""dnsconfig — configure cluster services from DNS TXT records."""

__version__ = "0.3.0"
