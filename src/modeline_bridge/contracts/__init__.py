"""JSON schema contracts for configuration and resolution output."""
