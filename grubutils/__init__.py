"""GrubUtils — edit the grub defaults file and regenerate grub.cfg as root."""

__version__ = "0.1.0"
