"""Application layer: commands, the session engine and the access guard."""
