"""git-status-color — a stable 24-bit prompt colour for the current git commit."""
