"""Audio property decoding for IFF containers."""
