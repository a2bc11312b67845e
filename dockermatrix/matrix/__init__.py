"""Version matrix loading, expansion and output planning."""
