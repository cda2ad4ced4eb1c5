"""Allow ``python -m pngdataurl``."""

from pngdataurl.cli import main

if __name__ == "__main__":
    main()
