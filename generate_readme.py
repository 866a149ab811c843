# Entry point for generating the benchmark README from the latest results

import sys
from src.report.cli import main


if __name__ == "__main__":
    sys.exit(main())
