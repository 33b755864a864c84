"""Style signature analysis and adaptation."""
