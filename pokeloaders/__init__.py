"""Data-loading patterns (parallel fetches, nested routes, streaming) against PokeAPI."""
