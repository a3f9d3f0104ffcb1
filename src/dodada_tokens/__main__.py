"""Allow ``python -m dodada_tokens``."""

from dodada_tokens.cli import main

if __name__ == "__main__":
    main()
