# Main.py
""""" Entry point for the formula calculator when run from a checkout.

   Installed copies use the 'formula-calc' command instead.
"""""
import sys

from FormulaCore.cli import main


if __name__ == "__main__":
    sys.exit(main())
