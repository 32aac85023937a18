"""Allow ``python -m grubutils``."""

from grubutils.main import main

main()
