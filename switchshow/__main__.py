"""Allow ``python -m switchshow``."""

from switchshow.cli import main

if __name__ == "__main__":
    main()
