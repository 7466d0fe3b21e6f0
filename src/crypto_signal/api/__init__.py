"""HTTP surface: dispatcher and FastAPI app."""
