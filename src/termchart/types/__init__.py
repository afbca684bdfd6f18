"""Chart datum and option types."""
