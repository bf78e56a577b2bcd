"""Single-winner ballot tallying under several voting methods."""
