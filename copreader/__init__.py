"""Parse and cache a plain-text liturgical library."""
