"""Domain layer: business rules with no I/O."""
