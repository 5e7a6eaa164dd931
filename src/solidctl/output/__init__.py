"""Output layer: turn ServiceResult into Rich text, quiet text, or JSON."""
