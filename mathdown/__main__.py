"""Allow ``python -m mathdown``."""

from mathdown.main import main


if __name__ == "__main__":
    main()
