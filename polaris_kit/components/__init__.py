"""Design-system components."""
