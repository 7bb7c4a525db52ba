"""Per-user free-form parameter map: read, merge and delete keys."""
