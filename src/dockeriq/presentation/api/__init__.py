"""DockerIQ REST API (FastAPI)."""
