#!/usr/bin/env python3
"""
File Shifter - Main Entry

Supports:
- CLI mode (default)
- GUI mode (--gui parameter)

Usage:
    python main.py './file[0-9]*.txt' 1        # Shift by 1
    python main.py './file[0-9]*.txt' -1 -v    # Shift by -1, verbose
    python main.py -help                       # Help
    python main.py --gui                       # GUI mode
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    if "--gui" in sys.argv:
        try:
            from shifter_gui import main as gui_main
        except ImportError as e:
            print(f"Error: Unable to start GUI, please ensure PySide6 is installed", file=sys.stderr)
            print(f"Detailed error: {e}", file=sys.stderr)
            print("\nInstall command: pip install PySide6", file=sys.stderr)
            return 1
        return gui_main()

    from shifter_cli import main as cli_main
    return cli_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
