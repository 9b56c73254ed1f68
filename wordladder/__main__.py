"""Allow ``python -m wordladder``."""

from wordladder.cli import main

if __name__ == "__main__":
    main()
