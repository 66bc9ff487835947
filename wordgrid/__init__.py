"""Word-search puzzle generation, placement and selection checking."""
