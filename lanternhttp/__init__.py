"""Building blocks for small HTTP servers: requests, responses, negotiation, compression, configuration, logging and rate limiting."""

__version__ = "1.0.0"