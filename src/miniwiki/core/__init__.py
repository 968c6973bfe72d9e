"""Core wiki components: paths, storage, rendering, auth and page flows."""
