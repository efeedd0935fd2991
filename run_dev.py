# run_dev.py
"""
Local development launcher.
Equivalent to: `python -m scriptgen.app` (settings come from .env).
"""

from scriptgen.app import main

if __name__ == "__main__":
    main()
