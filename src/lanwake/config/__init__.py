"""Host inventory configuration."""
