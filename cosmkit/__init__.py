"""Environment interfaces, transaction responses, wasm artifacts and Cosmos keys."""

__version__ = "0.1.0"
__all__ = ["environment", "errors", "index_response", "paths", "keys"]