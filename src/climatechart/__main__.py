"""
Run with: python -m climatechart [path/to/surface-temperature.csv]
"""
import sys

from climatechart.main import main

if __name__ == "__main__":
    sys.exit(main())
