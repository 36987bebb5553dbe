"""Core profile resolution engine for torcx."""
