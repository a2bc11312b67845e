"""Template compilation, rendering and file output."""
