"""Users module: accounts, CRUD endpoints and default administrator bootstrap."""
