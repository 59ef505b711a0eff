"""HTTP API for the ledger."""
