"""AWS S3 backend: client factory and storage implementation."""
