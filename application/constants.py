"""Application-level constants."""

# Coverage report columns
KEY_COL = "key"
CANONICAL_COL = "canonical_name"
MIME_COL = "preferred_mime_name"
