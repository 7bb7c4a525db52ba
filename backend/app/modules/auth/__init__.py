"""Auth module: registration, login and bearer token issuance."""
