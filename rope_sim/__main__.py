"""Allow ``python -m rope_sim``."""

from rope_sim.cli import main

if __name__ == "__main__":
    main()
