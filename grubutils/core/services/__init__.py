"""Services — privilege handling and editor lookup."""
