"""Layout engine, rendering and CLI for word-scatter."""
