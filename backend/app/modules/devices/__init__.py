"""Device inventory CRUD."""
