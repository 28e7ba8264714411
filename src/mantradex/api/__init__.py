"""HTTP tool surface for the DEX service."""
