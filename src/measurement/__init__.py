"""
measurement - analytics hit payloads over the Measurement Protocol

Builds pageview, screenview, event, exception and social hits, validates
and percent-encodes their fields, and serializes them into the ordered
query string the collection endpoint expects.
"""

__version__ = "0.1.0"
