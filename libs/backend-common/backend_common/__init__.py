"""Infrastructure helpers shared by the coach services."""
