"""Adapters – MongoDB, Redis, Cloudinary and FastAPI integrations."""
