"""
Run with: python -m stringvibration
"""
import sys

from stringvibration.main import main

if __name__ == "__main__":
    sys.exit(main())
