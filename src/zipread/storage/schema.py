"""Database schema for extracted-archive store files."""

SCHEMA = """
-- Entries table: one row per extracted archive entry
CREATE TABLE IF NOT EXISTS entries (
    name TEXT PRIMARY KEY,
    data BLOB NOT NULL,
    size_bytes INTEGER NOT NULL,
    is_binary INTEGER NOT NULL DEFAULT 0
);

-- Metadata table: source archive and extraction details
CREATE TABLE IF NOT EXISTS metadata (
    key TEXT PRIMARY KEY,
    value TEXT
);
"""
