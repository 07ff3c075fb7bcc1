"""Git-like version control for externally rendered map documents."""
