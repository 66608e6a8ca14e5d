"""Game rule packages."""
