"""cardpile用户界面."""
